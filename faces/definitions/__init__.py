"""Built-in face definitions, one module per family."""
