"""Type-name classification for coupling metrics.

Two exclusion lists are used:

- ``PRIMITIVE_TYPES``: language primitives and their wrappers. A type
  outside this list that is not the analysed class itself is "foreign"
  (FDP, ATFD).
- ``LIBRARY_TYPES``: primitives, primitive arrays, wrappers and common
  standard-library classes (collections, I/O, concurrency, reflection,
  NIO). Compared case-insensitively (DAC, CBO).
"""

from __future__ import annotations

import re

PRIMITIVE_TYPES = frozenset(
    {
        "int",
        "float",
        "double",
        "boolean",
        "char",
        "byte",
        "short",
        "long",
        "void",
        "string",
        "String",
        "Integer",
        "Float",
        "Double",
        "Boolean",
        "Character",
        "Byte",
        "Short",
        "Long",
        "Void",
    }
)

_PRIMITIVES = ["int", "float", "double", "boolean", "char", "byte", "short", "long"]
_WRAPPERS = [
    "String",
    "Integer",
    "Float",
    "Double",
    "Boolean",
    "Character",
    "Byte",
    "Short",
    "Long",
]

_LIBRARY_TYPE_LIST = [
    *_PRIMITIVES,
    "void",
    # Primitive arrays
    *(f"{p}[]" for p in _PRIMITIVES),
    *(f"{p}[][]" for p in _PRIMITIVES),
    # Wrapper classes and their arrays
    *_WRAPPERS,
    "Void",
    "Number",
    *(f"{w}[]" for w in _WRAPPERS),
    # java.lang
    "Object",
    "Class",
    "Exception",
    "RuntimeException",
    "Throwable",
    "Error",
    "Thread",
    "Runnable",
    "System",
    "Math",
    "Runtime",
    "Process",
    "ProcessBuilder",
    "SecurityManager",
    # Collections framework
    "Collection",
    "List",
    "ArrayList",
    "LinkedList",
    "Vector",
    "Stack",
    "Set",
    "HashSet",
    "TreeSet",
    "LinkedHashSet",
    "Map",
    "HashMap",
    "TreeMap",
    "LinkedHashMap",
    "Hashtable",
    "Properties",
    "Queue",
    "Deque",
    "PriorityQueue",
    "ArrayDeque",
    "Iterator",
    "Enumeration",
    "Comparator",
    "Comparable",
    # I/O
    "File",
    "InputStream",
    "OutputStream",
    "Reader",
    "Writer",
    "BufferedReader",
    "BufferedWriter",
    "FileInputStream",
    "FileOutputStream",
    "FileReader",
    "FileWriter",
    # Utilities
    "Date",
    "Calendar",
    "GregorianCalendar",
    "TimeZone",
    "Locale",
    "Random",
    "Scanner",
    "StringTokenizer",
    "UUID",
    "Timer",
    "TimerTask",
    "BigInteger",
    "BigDecimal",
    "Optional",
    "Stream",
    "Arrays",
    "Collections",
    # Concurrency
    "Callable",
    "Future",
    "ExecutorService",
    "Executor",
    "Lock",
    "ReentrantLock",
    "Condition",
    "Semaphore",
    "CountDownLatch",
    "CyclicBarrier",
    "AtomicInteger",
    "AtomicLong",
    "AtomicBoolean",
    "AtomicReference",
    # Reflection
    "Method",
    "Field",
    "Constructor",
    "Modifier",
    "Proxy",
    "InvocationHandler",
    # NIO
    "Buffer",
    "ByteBuffer",
    "CharBuffer",
    "Path",
    "Paths",
    "Files",
    "Channel",
    "Selector",
]

LIBRARY_TYPES = frozenset(t.lower() for t in _LIBRARY_TYPE_LIST)

GENERIC_TYPE = re.compile(r"^(\w+)<(.+)>$")
_TYPE_TOKEN = re.compile(r"[A-Za-z_$][\w$.]*(?:\[\])*")
_TYPE_KEYWORDS = frozenset(
    {"extends", "super", "final", "var", "No_Type", "Unknown", "None", "undefined"}
)


def base_type(type_name: str) -> str:
    """Strip generic arguments: ``List<Book>`` -> ``List``."""
    return type_name.split("<")[0].strip()


def is_primitive_type(type_name: str) -> bool:
    """Check a type against the primitive/wrapper list (generics stripped)."""
    return base_type(type_name) in PRIMITIVE_TYPES


def is_foreign_type(type_name: str, current_class: str | None) -> bool:
    """A non-empty type that is neither primitive nor the analysed class."""
    base = base_type(type_name)
    return bool(base) and not is_primitive_type(base) and base != current_class


def is_library_type(type_name: str) -> bool:
    """Case-insensitive check against the primitive + standard library list."""
    return type_name.strip().lower() in LIBRARY_TYPES


def split_generic(type_name: str) -> tuple[str, str] | None:
    """Return (container, element) for ``Container<Element>`` types."""
    match = GENERIC_TYPE.match(type_name.strip())
    if match is None:
        return None
    return match.group(1), match.group(2)


def referenced_type_names(type_text: str) -> list[str]:
    """All type identifiers mentioned in a type expression.

    Generic arguments are decomposed and array brackets are dropped:
    ``Map<String, List<Book>>`` -> ``["Map", "String", "List", "Book"]``.
    Qualified names are reduced to their last segment.
    """
    names: list[str] = []
    for token in _TYPE_TOKEN.findall(type_text):
        name = token.replace("[]", "").rsplit(".", 1)[-1]
        if name and name not in _TYPE_KEYWORDS and name != "?":
            names.append(name)
    return names


def param_type(param: str) -> str:
    """Extract the declared type from an ``"annotations type name"`` string."""
    parts = param.split()
    # Drop annotation tokens and the trailing parameter name
    parts = [p for p in parts if not p.startswith("@") and p != ","]
    if len(parts) >= 2:
        return " ".join(parts[:-1])
    return parts[0] if parts else ""
