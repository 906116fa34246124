from gateway_admin.db.models import Base
from gateway_admin.db.init_db import init_database

# Create tables if they don't exist
def init_db():
    """Initialize the database - create the tables if needed."""
    init_database()
