# Import every model so Base.metadata knows about all tables.
from app.db.base_class import Base  # noqa: F401
from app.models import category, course, enrollment, product, user, video  # noqa: F401
