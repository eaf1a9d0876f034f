"""Node.js built-in modules, never reported as missing dependencies."""

from __future__ import annotations

NODE_BUILTINS = frozenset(
    {
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

# Explicit scheme for core modules, e.g. require('node:fs')
NODE_SCHEME = "node:"


def is_builtin(module: str) -> bool:
    """Return True if *module* names a Node.js core module.

    Subpaths such as ``fs/promises`` resolve to their top-level module.
    """
    if module.startswith(NODE_SCHEME):
        return True
    return module.split("/", 1)[0] in NODE_BUILTINS
