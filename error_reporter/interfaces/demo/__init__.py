"""Demo endpoints exercising the error reporter."""
