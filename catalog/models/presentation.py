"""Admin presentation metadata carried on model columns and relationships.

Fields are annotated through SQLAlchemy ``info`` dictionaries so the admin
API can describe an entity's form without knowing its concrete class.
"""
from sqlalchemy import inspect


def admin_field(
    friendly_name,
    help_text=None,
    group=None,
    field_type=None,
    enumeration=None,
    prominent=False,
    translatable=False,
    name=None,
):
    return {
        "admin": {
            "name": name,
            "friendly_name": friendly_name,
            "help_text": help_text,
            "group": group,
            "field_type": field_type,
            "enumeration": enumeration,
            "prominent": prominent,
            "translatable": translatable,
        }
    }


def admin_collection(friendly_name, add_type="PERSIST"):
    return {"admin": {"friendly_name": friendly_name, "add_type": add_type}}


def describe_entity(model):
    """Return presentation metadata for every annotated field of ``model``."""
    mapper = inspect(model)
    fields = []
    for attr in mapper.column_attrs:
        column = attr.columns[0]
        meta = column.info.get("admin")
        if not meta:
            continue
        enumeration = meta["enumeration"]
        fields.append({
            "name": meta["name"] or attr.key,
            "column": column.name,
            "friendly_name": meta["friendly_name"],
            "help_text": meta["help_text"],
            "group": meta["group"],
            "field_type": meta["field_type"] or type(column.type).__name__.upper(),
            "choices": enumeration.choices() if enumeration else None,
            "prominent": meta["prominent"],
            "translatable": meta["translatable"],
        })

    collections = []
    for rel in mapper.relationships:
        meta = rel.info.get("admin")
        if not meta:
            continue
        collections.append({
            "name": rel.key,
            "target": rel.mapper.class_.__name__,
            "friendly_name": meta["friendly_name"],
            "add_type": meta["add_type"],
        })

    entity = getattr(model, "__admin_presentation__", {})
    return {
        "entity": model.__name__,
        "friendly_name": entity.get("friendly_name", model.__name__),
        "populate_to_one_fields": entity.get("populate_to_one_fields", False),
        "fields": fields,
        "collections": collections,
    }
