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

if typing.TYPE_CHECKING:
    from coldstream.observer import Observer


class Subscription:
    """
    Represents a subscription to an Observable.
    Unsubscribing stops the associated observer and runs its teardown action.
    """

    def __init__(self, observer: "Observer"):
        # Released on unsubscribe so the observer can be collected
        self._observer: "Observer | None" = observer

    @property
    def closed(self) -> bool:
        return self._observer is None or self._observer.is_unsubscribed

    def unsubscribe(self) -> None:
        """
        Stop receiving further events.
        """
        if self._observer is not None:
            self._observer.unsubscribe()
            self._observer = None
