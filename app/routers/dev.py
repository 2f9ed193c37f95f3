"""Dev-only endpoints for seeding.

Endpoints:
- POST /api/dev/seed - Create the local user + sample recipes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Post, User
from ..schemas import SeedResponse, UserOut
from ..services.importer import convert_recipe_text
from ..settings import settings

router = APIRouter()

LOCAL_USER_NAME = "Local Cook"

# Seed recipes go through the importer, the same path a pasted recipe takes
SEED_RECIPES = [
    {
        "category": "Dinner",
        "is_public": True,
        "text": """**Easy Tomato Pasta**
Serves: 2
Cooking time: 20 minutes

A weeknight staple. Simple and quick.

## Ingredients
- 200 g spaghetti
- 1 can chopped tomatoes
- 2 cloves garlic (sliced)
- a splash olive oil
- salt to taste

## Steps
1. Boil the spaghetti in salted water.
2. Fry the garlic in the oil, then add the **tomatoes**.
3. Toss the pasta through the sauce.

#pasta #vegetarian
""",
    },
    {
        "category": "Breakfast",
        "is_public": False,
        "text": """Overnight Oats
Prep time: 5 min

Ingredients:
- 1 cup rolled oats
- 1 cup milk
- 1 tbsp honey
- handful berries

Method:
- Stir everything together in a jar
- Chill overnight
""",
    },
]


def get_or_create_local_user(db: Session) -> User:
    email = settings.default_user_email or "local@recipeshare.dev"
    user = db.query(User).filter(User.email == email).first()
    if user:
        return user
    user = User(email=email, name=LOCAL_USER_NAME)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@router.post("/dev/seed", response_model=SeedResponse)
def seed(db: Session = Depends(get_db)):
    """Create the local user and sample recipes. Safe to run repeatedly."""
    user = get_or_create_local_user(db)

    created = 0
    for sample in SEED_RECIPES:
        _, form = convert_recipe_text(sample["text"])
        exists = db.query(Post).filter(Post.user_id == user.id, Post.title == form.title).first()
        if exists:
            continue

        db.add(Post(
            user_id=user.id,
            title=form.title,
            description=form.description,
            ingredients=[i.model_dump() for i in form.ingredients],
            steps=[s.model_dump() for s in form.steps],
            tags=form.tags,
            cooking_time=form.cooking_time,
            difficulty=form.difficulty,
            category=sample["category"],
            is_public=sample["is_public"],
        ))
        created += 1

    db.commit()

    return SeedResponse(
        user=UserOut.model_validate(user),
        posts_created=created,
        message=f"Created {created} recipes for {user.email}",
    )
