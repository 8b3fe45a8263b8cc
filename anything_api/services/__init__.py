"""Business services sitting between routes and repositories."""
