"""Global pytest configuration."""

import os

# Keep tests off the working directory's itinerary folder before any imports
os.environ.setdefault("ITINERARY_BACKEND", "memory")
