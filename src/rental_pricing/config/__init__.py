"""Config subpackage - pricing rates and logging setup."""
