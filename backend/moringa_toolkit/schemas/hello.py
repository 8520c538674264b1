from pydantic import BaseModel
from datetime import datetime

class HelloResponse(BaseModel):
    message: str
    time: datetime
