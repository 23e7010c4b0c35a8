"""Convert HTTP method + path to client function names.

Pattern: {method}{BaseName}[ById]
  - base name is the operationId when present and not "unknown"
  - otherwise the literal path segments joined with "_"
  - ById is appended whenever the path has a {placeholder}

Examples:
  GET    /users                        -> getUsers
  GET    /users/{id}                   -> getUsersById
  POST   /users                        -> postUsers
  DELETE /users/{id}/posts/{postId}    -> deleteUsersPostsById
  GET    /pets/{petId}  operationId=find_pet -> getFindPetById
"""

from __future__ import annotations

# Placeholder operationId that some exporters write when none was set
UNKNOWN_OPERATION_ID = "unknown"


def _is_placeholder(segment: str) -> bool:
    return segment.startswith("{") and segment.endswith("}")


def extract_path_params(path: str) -> list[str]:
    """Return placeholder names in left-to-right order, without duplicates."""
    params: list[str] = []
    for segment in path.split("/"):
        if _is_placeholder(segment):
            name = segment[1:-1]
            if name not in params:
                params.append(name)
    return params


def to_upper_camel(text: str) -> str:
    """Convert snake_case to UpperCamelCase, keeping the rest of each word as is."""
    return "".join(word[0].upper() + word[1:] for word in text.split("_") if word)


def fallback_base_name(path: str) -> str:
    """Join the literal path segments with underscores."""
    parts = [p for p in path.split("/") if p and not p.startswith("{")]
    return "_".join(parts)


def build_function_name(method: str, path: str, operation_id: str | None = None) -> str:
    """Build a function name from HTTP method and path.

    Returns a name like 'getUsers' or 'getUsersById'.
    """
    if not operation_id or operation_id == UNKNOWN_OPERATION_ID:
        base_name = fallback_base_name(path)
    else:
        base_name = operation_id
    name = method.lower() + to_upper_camel(base_name)
    if extract_path_params(path):
        name += "ById"
    return name


def to_template_literal(path: str) -> str:
    """Rewrite {name} placeholders into ${name} interpolations."""
    for param in extract_path_params(path):
        path = path.replace(f"{{{param}}}", f"${{{param}}}")
    return path
