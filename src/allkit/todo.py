"""Todo — placeholder for a type that has not been defined yet.

    MyPayload = Todo
"""

from typing import Any

Todo = Any
