"""create-boot commands."""
