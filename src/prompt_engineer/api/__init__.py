"""HTTP routers for Prompt Engineer Pro."""
