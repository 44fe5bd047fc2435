from pydantic import BaseModel, Field


class ActorBase(BaseModel):
    full_name: str = Field(..., min_length=3, max_length=50, example="Tom Hardy",
                           description="The actor's full name.")
    profile_picture_url: str = Field(..., example="https://example.com/actors/tom-hardy.jpg",
                                     description="URL of the actor's profile picture.")
    bio: str = Field(..., description="A short biography of the actor.")


class ActorCreateSchema(ActorBase):
    pass


class ActorUpdateSchema(ActorBase):
    id: int = Field(..., description="The ID of the actor being edited; must match the path.")


class ActorSchema(ActorBase):
    id: int = Field(..., description="The unique ID of the actor.")

    class Config:
        from_attributes = True
