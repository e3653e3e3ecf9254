"""Commands shipped with the framework (discovered like any other package)."""
