"""Configuration — defaults, YAML/env hierarchy and validation."""
