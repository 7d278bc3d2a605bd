from ulid import ULID


def new_category_id() -> str:
    return f"c_{ULID()}"


def new_item_id() -> str:
    return f"i_{ULID()}"
