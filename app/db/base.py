from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# Import models so create_all sees every table
from app.models import *  # noqa
