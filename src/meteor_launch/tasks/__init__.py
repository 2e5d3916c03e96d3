"""
Launch task collection.

Task modules are flattened into a single namespace so every action is a
top-level command: launch init, launch settings, launch clean, ...
"""

from invoke import Collection

from . import init, show, clean, certs, platforms


def build_namespace() -> Collection:
    """Collect tasks from each task module into one flat namespace."""
    namespace = Collection()
    for submodule in [init, show, clean, certs, platforms]:
        submodule_collection = Collection.from_module(submodule)
        for task_name, task in submodule_collection.tasks.items():
            namespace.add_task(task)
    return namespace


namespace = build_namespace()
