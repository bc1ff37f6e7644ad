from marketboard.testing.fixtures import standard_board  # noqa: F401
