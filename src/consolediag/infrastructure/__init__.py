"""Infrastructure layer: concrete message sinks."""
