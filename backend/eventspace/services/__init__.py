"""Service layer: routes call these with a Session; domain errors come from eventspace.core.errors."""
