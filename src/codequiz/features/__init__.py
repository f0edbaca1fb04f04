"""Quiz features: enumeration, sampling, rendering and line counting."""
