from pydantic import BaseModel, Field


class CinemaBase(BaseModel):
    logo: str = Field(..., description="URL of the cinema logo.")
    name: str = Field(..., min_length=1, max_length=100, example="Cinema City",
                      description="The name of the cinema.")
    description: str = Field(..., description="A description of the cinema.")


class CinemaCreateSchema(CinemaBase):
    pass


class CinemaUpdateSchema(CinemaBase):
    id: int = Field(..., description="The ID of the cinema being edited; must match the path.")


class CinemaSchema(CinemaBase):
    id: int = Field(..., description="The unique ID of the cinema.")

    class Config:
        from_attributes = True
