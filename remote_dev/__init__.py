"""Pulumi declarations for the remote dev EC2 environment."""
