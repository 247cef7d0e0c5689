from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    inventory: int = Field(default=0, ge=0)


class ProductResponse(BaseModel):
    id: int
    name: str
    inventory: int

    class Config:
        from_attributes = True
