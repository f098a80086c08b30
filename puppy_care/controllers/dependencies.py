"""
Access to the repositories and clock wired by ``create_app``.
"""

from dataclasses import dataclass

from flask import current_app

from puppy_care.core.clock import Clock
from puppy_care.repositories import Repositories

EXTENSION_KEY = "puppy_care"


@dataclass
class AppDependencies:
    repositories: Repositories
    clock: Clock


def init_app(app, repositories: Repositories, clock: Clock) -> None:
    app.extensions[EXTENSION_KEY] = AppDependencies(repositories, clock)


def get_repositories() -> Repositories:
    return current_app.extensions[EXTENSION_KEY].repositories


def get_clock() -> Clock:
    return current_app.extensions[EXTENSION_KEY].clock
