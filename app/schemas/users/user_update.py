from pydantic import BaseModel


class UserUpdateRequest(BaseModel):
    """Rename request: the id of an existing user and the name to give it.

    ``id`` is mandatory, so a request without one is rejected when it is
    built instead of when the id is read. Both values are stored exactly as
    given: no coercion (``"42"`` is not an id), and ``name`` may be the empty
    string. Instances are frozen once constructed.
    """

    id: int
    name: str

    class Config:
        frozen = True
        strict = True
