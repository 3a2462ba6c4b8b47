"""Player registry: CRUD service for game-character player records."""
