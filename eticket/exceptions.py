class EntityIdMismatchError(ValueError):
    def __init__(self, path_id: int, entity_id: int | None):
        self.path_id = path_id
        self.entity_id = entity_id
        super().__init__(f"Entity id {entity_id} does not match requested id {path_id}.")


class RelatedEntityNotFoundError(LookupError):
    def __init__(self, entity_name: str, entity_ids):
        self.entity_name = entity_name
        self.entity_ids = list(entity_ids)
        ids = ", ".join(str(entity_id) for entity_id in self.entity_ids)
        super().__init__(f"{entity_name} not found: {ids}.")


class BaseSecurityError(Exception):
    def __init__(self, message=None):
        if message is None:
            message = "A security error occurred."
        super().__init__(message)


class TokenExpiredError(BaseSecurityError):
    def __init__(self, message="Token has expired."):
        super().__init__(message)


class InvalidTokenError(BaseSecurityError):
    def __init__(self, message="Invalid token."):
        super().__init__(message)
