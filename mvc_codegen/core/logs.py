# Configuration
IGNORE_PATTERNS_LOADED = (
    "Loaded {exclude_count} exclude and {unignore_count} unignore patterns from {path}"
)
IGNORE_PATTERNS_READ_FAILED = "Failed to read ignore file {path}: {error}"

# Timing
FUNC_TIMING = "{func} finished in {time:.2f} ms"

# View locator
VIEW_ROOT_MISSING = "View root {path} does not exist; no views will be generated"
VIEW_SCAN_START = "Scanning {path} for {suffix} templates"
VIEW_NOT_IN_CONVENTION_FOLDER = "Skipping {path}: not under a pages or views folder"
VIEW_EXCLUDED = "Skipping layout file {path}"
VIEW_FOUND = "Found {kind} {name} at {path}"
VIEW_SCAN_DONE = "Located {count} views ({pages} pages) under {path}"

# Declaration query
MEMBER_SKIPPED_GENERATED = "Ignoring previously generated {kind} {controller}.{name}"
MEMBER_SKIPPED_NOT_ACTION = "Ignoring {controller}.{name}: not a public instance method"

# Controller generator
NAMESPACE_GROUP = "Generating namespace {namespace} (area '{area}', {count} controllers)"
CONTROLLER_GENERATING = "Generating {controller} as '{name}'"
DEFAULT_CONSTRUCTOR_ADDED = "{controller} has no public constructor; adding default"
ACTION_STUB_SUPPRESSED = "No stub for {controller}.{action}: a parameterless overload exists"
ASYNC_RETURN_UNWRAPPED = "{controller}.{action} returns {wrapper}; unwrapping to {inner}"
VIEW_MEMBER_RENAMED = "{owner}.{name} is already taken; exposing {path} as {owner}.{renamed}"
VIEWS_CLASS_BUILT = "Built views class from {count} templates ({pages} pages)"
GENERATION_DONE = "Generated {controllers} controllers in {namespaces} namespaces"
