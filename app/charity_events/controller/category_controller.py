from sqlalchemy.orm import Session
from charity_events.models.category_model import Category
from charity_events.response_model import model_to_dict


# ------------------ Retrieve ALL Categories ------------------
async def retrieve_categories_controller(db: Session):
    categories = db.query(Category).order_by(Category.name.asc()).all()
    return [model_to_dict(category) for category in categories]
