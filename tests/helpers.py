"""Shared values for the test suite."""

ADMIN_EMAIL = "admin@warmphuket.ru"
ADMIN_PASSWORD = "Admin@123456"
# bcrypt refuses anything past 72 bytes
TOO_LONG_PASSWORD = "x" * 80
