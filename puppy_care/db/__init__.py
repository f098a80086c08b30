# Database package: engine/session factory (session.py) and ORM models (base.py)
