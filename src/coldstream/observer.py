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
import typing
from collections.abc import Callable
from typing import TypeVar

from coldstream.base.observer_base import ObserverBase
from coldstream.handlers import ObserverHandlers
from coldstream.handlers import OnComplete
from coldstream.handlers import OnError
from coldstream.handlers import OnNext
from coldstream.utils.type_utils import override

logger = logging.getLogger(__name__)

# Contravariant type param: An Observer that can accept type X can also
# accept any supertype of X.
_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name

Teardown = Callable[[], typing.Any]


class TeardownAlreadyAttachedError(Exception):

    def __init__(self, additional_message: str | None = None):
        parts = ["A teardown action has already been attached to this observer."]
        if additional_message:
            parts.append(additional_message)
        super().__init__(" ".join(parts))


class Observer(ObserverBase[_T_in_contra]):
    """
    Concrete Observer that wraps user-provided callbacks into an ObserverBase.

    The first of ``on_error``, ``on_complete`` or ``unsubscribe`` moves the observer into
    the unsubscribed state. From then on no callback is invoked and the teardown action
    attached through ``set_teardown`` has run exactly once.

    Exceptions raised by callbacks are not caught here; they propagate to whoever issued
    the notification.
    """

    def __init__(
        self,
        on_next: OnNext | None = None,
        on_error: OnError | None = None,
        on_complete: OnComplete | None = None,
    ) -> None:
        self._handlers = ObserverHandlers(on_next=on_next, on_error=on_error, on_complete=on_complete)
        self._stopped = False
        self._unsubscribed = False
        self._teardown_attached = False
        self._teardown: Teardown | None = None

    @classmethod
    def from_handlers(cls, handlers: ObserverHandlers) -> "Observer":
        return cls(handlers.on_next, handlers.on_error, handlers.on_complete)

    @property
    def handlers(self) -> ObserverHandlers:
        return self._handlers

    @property
    def is_unsubscribed(self) -> bool:
        return self._unsubscribed

    @override
    def on_next(self, value: _T_in_contra) -> None:
        if self._stopped:
            return
        if self._handlers.on_next is None:
            return
        self._handlers.on_next(value)

    @override
    def on_error(self, exc: typing.Any) -> None:
        if self._stopped:
            return
        # Stop before dispatching so a reentrant notification from the handler is ignored
        self._stopped = True
        try:
            if self._handlers.on_error is not None:
                self._handlers.on_error(exc)
        finally:
            self.unsubscribe()

    @override
    def on_complete(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        try:
            if self._handlers.on_complete is not None:
                self._handlers.on_complete()
        finally:
            self.unsubscribe()

    def set_teardown(self, teardown: Teardown | None) -> None:
        """
        Attach the cleanup action returned by the producer that drives this observer.

        The producer only returns its teardown after it has been handed the observer, so
        this is called once the observer is already live. If the observer has already been
        unsubscribed by then (for example a producer that completes synchronously), the
        teardown runs immediately.

        Parameters
        ----------
        teardown : Teardown | None
            Zero-argument action, or ``None`` when the producer has nothing to clean up.

        Raises
        ------
        TeardownAlreadyAttachedError
            If a teardown was already attached to this observer.
        """
        if self._teardown_attached:
            raise TeardownAlreadyAttachedError()

        self._teardown_attached = True
        self._teardown = teardown

        if self._unsubscribed:
            self._run_teardown()

    def unsubscribe(self) -> None:
        """
        Stop delivering notifications and run the teardown action. Idempotent.
        """
        if self._unsubscribed:
            return
        self._stopped = True
        self._unsubscribed = True
        self._run_teardown()

    def _run_teardown(self) -> None:
        # Clear the slot first so the action can never run twice
        teardown, self._teardown = self._teardown, None
        if teardown is not None:
            logger.debug("Running teardown for observer %s", self)
            teardown()
