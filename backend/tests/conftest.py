"""Root conftest — shared test configuration."""

import os

# Tests never talk to a real Supabase project: the store handle is overridden
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")
os.environ.setdefault("LOG_FORMAT", "text")
