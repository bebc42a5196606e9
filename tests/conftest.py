# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from collections.abc import Callable

import pytest

from coldstream.observer import Observer


@pytest.fixture(name="events")
def events_fixture() -> list[tuple]:
    """
    Shared, ordered log of every callback and teardown invocation in a test.
    """
    return []


@pytest.fixture(name="recording_handlers")
def recording_handlers_fixture(events: list[tuple]) -> dict[str, Callable]:
    return {
        "on_next": lambda value: events.append(("next", value)),
        "on_error": lambda exc: events.append(("error", exc)),
        "on_complete": lambda: events.append(("complete", )),
    }


@pytest.fixture(name="recording_teardown")
def recording_teardown_fixture(events: list[tuple]) -> Callable[[], None]:
    return lambda: events.append(("teardown", ))


@pytest.fixture(name="captured_observers")
def captured_observers_fixture() -> list[Observer]:
    """
    Observers handed to a subscribe function, kept so a test can emit into them later.
    """
    return []


@pytest.fixture(name="debug_logs")
def debug_logs_fixture(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="coldstream")
    return caplog
