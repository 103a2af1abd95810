"""Feature modules: dictionary, vocabulary and review."""
