"""The did:btc1 DID method."""
