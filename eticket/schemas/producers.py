from pydantic import BaseModel, Field


class ProducerBase(BaseModel):
    full_name: str = Field(..., min_length=3, max_length=50, example="Denis Villeneuve",
                           description="The producer's full name.")
    profile_picture_url: str = Field(..., description="URL of the producer's profile picture.")
    bio: str = Field(..., description="A short biography of the producer.")


class ProducerCreateSchema(ProducerBase):
    pass


class ProducerUpdateSchema(ProducerBase):
    id: int = Field(..., description="The ID of the producer being edited; must match the path.")


class ProducerSchema(ProducerBase):
    id: int = Field(..., description="The unique ID of the producer.")

    class Config:
        from_attributes = True
