from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Callable, Iterable, List, Set, get_type_hints

from .client import FreeloClient
from .errors import FreeloClientError, ToolExecutionError

log = logging.getLogger("freelo_mcp.core.registry")

ClientProvider = Callable[[], FreeloClient]


# --- Discovery helpers ----------------------------------------------------- #


def discover_tool_modules(package_name: str = "freelo_mcp.tools") -> List[ModuleType]:
    """Import all modules under the given tools package, skipping failures."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        name = finder.name
        try:
            module = importlib.import_module(name)
        except Exception as exc:
            log.error("Failed importing tool module %s: %s", name, exc)
            continue
        modules.append(module)

    return modules


def iter_tool_functions(module: ModuleType) -> Iterable[Callable]:
    """Yield functions that satisfy the tool convention."""
    for _, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            continue

        params = list(inspect.signature(func).parameters.values())
        if not params or params[0].name != "client":
            log.debug(
                "Skipping %s.%s: first parameter must be 'client'",
                module.__name__,
                func.__name__,
            )
            continue

        yield func


# --- Wrapping / registration ---------------------------------------------- #


def _wrap_tool(func: Callable, client_provider: ClientProvider, *, owns_client: bool):
    """Return a wrapper that injects a client and hides it from the signature."""
    original_sig = inspect.signature(func)
    type_hints = get_type_hints(func)

    new_params = []
    for i, (name, param) in enumerate(original_sig.parameters.items()):
        if i == 0 and name == "client":
            continue
        ann = type_hints.get(name, param.annotation)
        new_params.append(param.replace(annotation=ann))

    return_ann = type_hints.get("return", original_sig.return_annotation)
    new_sig = inspect.Signature(parameters=new_params, return_annotation=return_ann)

    async def wrapped(*args, **kwargs):
        client = client_provider()
        try:
            return await func(client, *args, **kwargs)
        except FreeloClientError as exc:
            raise ToolExecutionError(exc) from exc
        finally:
            if owns_client:
                await client.aclose()

    wrapped.__name__ = func.__name__
    wrapped.__doc__ = func.__doc__
    wrapped.__module__ = func.__module__
    wrapped.__signature__ = new_sig  # type: ignore[attr-defined]
    return wrapped


def register_discovered_tools(
    app,
    client_provider: ClientProvider | FreeloClient,
    modules: List[ModuleType] | None = None,
) -> List[str]:
    """
    Register discovered tools on an app that exposes a .tool decorator.

    A callable provider builds one client per tool call, closed afterwards.
    A FreeloClient instance is shared by every call and left open.
    Freelo failures surface as ToolExecutionError carrying the upstream body.
    """
    owns_client = True
    if isinstance(client_provider, FreeloClient):
        _client = client_provider
        owns_client = False

        def client_provider():
            return _client

    if not hasattr(app, "tool"):
        raise TypeError("app must expose a 'tool' decorator")

    modules = modules if modules is not None else discover_tool_modules()
    seen_names: Set[str] = set()
    registered: List[str] = []

    for module in modules:
        for func in iter_tool_functions(module):
            name = func.__name__
            if name in seen_names:
                raise ValueError(f"Duplicate tool name detected: {name}")

            wrapped = _wrap_tool(func, client_provider, owns_client=owns_client)
            app.tool(name=name)(wrapped)
            seen_names.add(name)
            registered.append(name)
            log.debug("Registered tool: %s (%s)", name, module.__name__)

    log.info("Registered %d tools", len(registered))
    return registered


__all__ = [
    "ClientProvider",
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
]
