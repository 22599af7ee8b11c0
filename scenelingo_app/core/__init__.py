"""Core infrastructure shared by every SceneLingo module."""
