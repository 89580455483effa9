"""Configuration, data structures, errors and reporters shared by every stage."""
