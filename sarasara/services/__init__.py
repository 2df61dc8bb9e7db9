"""Services that talk to upstream hosts."""
