"""CGT Calculator: Australian capital gains tax estimates."""

__version__ = "0.1.0"
