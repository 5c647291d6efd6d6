"""Generation of the Java test class."""
