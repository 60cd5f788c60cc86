"""Job Tracker service package."""
