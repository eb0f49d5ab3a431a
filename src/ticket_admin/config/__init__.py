"""Config subpackage - process-wide settings."""
