"""Construction of did:btc1 decentralized identifiers."""
