"""
Wastebin Sensor API
===================

This is the Python package for the backend API.

HOW IT'S ORGANIZED:
------------------
- models/    = Data structures (what does a reading look like?)
- services/  = Workers (check headers, build rows, talk to Supabase)
- routers/   = API endpoints (the doors into our app)
- utils/     = Validation and timestamp helpers
- config.py  = Settings from environment variables
- errors.py  = Everything that turns into {"status": "00"}
- main.py    = Puts it all together and starts the server
"""

__version__ = "1.0.0"
