"""Provider definitions shipped with llmrelay."""
