"""Names an engine installs in the global scope before any script runs."""

DEFAULT_GLOBALS = frozenset([
    # Console object
    "console",
    # Value properties
    "Infinity",
    "NaN",
    "undefined",
    "globalThis",
    # Basic type constructors
    "Object",
    "Array",
    "Function",
    "Number",
    "String",
    "Boolean",
    "Symbol",
    "Date",
    "RegExp",
    "Map",
    "Set",
    "WeakMap",
    "WeakSet",
    "Promise",
    "Proxy",
    "Reflect",
    # Error constructors
    "Error",
    "TypeError",
    "SyntaxError",
    "ReferenceError",
    "RangeError",
    "URIError",
    "EvalError",
    # Namespace objects
    "Math",
    "JSON",
    # Typed arrays
    "ArrayBuffer",
    "Int8Array",
    "Uint8Array",
    "Uint8ClampedArray",
    "Int16Array",
    "Uint16Array",
    "Int32Array",
    "Uint32Array",
    "Float32Array",
    "Float64Array",
    # Global functions
    "isNaN",
    "isFinite",
    "parseInt",
    "parseFloat",
    "encodeURI",
    "encodeURIComponent",
    "decodeURI",
    "decodeURIComponent",
    "eval",
])
