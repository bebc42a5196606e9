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

import typing
from collections.abc import Callable

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Handler return values are ignored, so any return type is accepted.
OnNext = Callable[[typing.Any], typing.Any]
OnError = Callable[[typing.Any], typing.Any]
OnComplete = Callable[[], typing.Any]


class ObserverHandlers(BaseModel):
    """
    Immutable record of the optional callbacks an Observer dispatches to.

    Every field that is set must be callable, otherwise construction fails with a
    ``pydantic.ValidationError``.
    """
    model_config = ConfigDict(frozen=True)

    on_next: OnNext | None = Field(default=None, description="Invoked with each emitted value.")
    on_error: OnError | None = Field(default=None, description="Invoked once with the terminal error payload.")
    on_complete: OnComplete | None = Field(default=None, description="Invoked once when the producer completes.")
