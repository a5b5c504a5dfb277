from pydantic import BaseModel


class DocumentSchema(BaseModel):
    path: str
    name: str
    directory: str
    url: str


class DocumentListResponse(BaseModel):
    documents: list[DocumentSchema]
    groups: dict[str, int]
    total: int


class RenderedDocument(BaseModel):
    path: str
    html: str


class HealthResponse(BaseModel):
    status: str = "ok"
    docs_dir: str
    documents: int
    watching: bool
