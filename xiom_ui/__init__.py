"""xiom-ui: fetch UI components from a registry into your project."""
