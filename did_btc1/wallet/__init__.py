"""Key material, key types and the DID method registry."""
