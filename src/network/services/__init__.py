"""Domain services behind the network API views."""
