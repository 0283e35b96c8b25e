"""Shared test data."""

import io

from sqlalchemy.exc import OperationalError

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00fake-jpeg-body\xff\xd9"


def image_upload(name="rex.jpg", data=JPEG_BYTES):
    """Multipart file tuple understood by Flask's test client."""
    return (io.BytesIO(data), name)


class BrokenSession:
    """Stands in for a session whose database has gone away."""

    def __init__(self):
        self.rolled_back = False

    def _fail(self, statement):
        raise OperationalError(statement, {}, Exception("database is locked"))

    def add(self, obj):
        pass

    def commit(self):
        self._fail("COMMIT")

    def query(self, *entities):
        self._fail("SELECT")

    def get(self, entity, ident):
        self._fail("SELECT")

    def delete(self, obj):
        self._fail("DELETE")

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass
