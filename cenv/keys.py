from dataclasses import dataclass


def canonical_key(*fragments: str) -> str:
    """
    Builds an environment variable name from key fragments.

    Fragments are joined with "_", upper-cased, and every "." becomes "_",
    so ("app.key",), ("APP_KEY",) and ("app", "key") all give "APP_KEY".
    No fragments gives "", which never matches a variable.
    """
    return "_".join(fragments).upper().replace(".", "_")


@dataclass(frozen=True)
class EnvKey:
    """
    Canonical environment variable name.
    """
    value: str

    @staticmethod
    def of(*fragments: str) -> "EnvKey":
        return EnvKey(canonical_key(*fragments))

    def __str__(self) -> str:
        return self.value
