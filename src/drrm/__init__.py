"""Municipal disaster-risk-management dashboard services."""
