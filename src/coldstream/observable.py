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
from collections.abc import Iterable
from typing import TypeVar

from coldstream.base.observable_base import ObservableBase
from coldstream.base.observer_base import ObserverBase
from coldstream.handlers import ObserverHandlers
from coldstream.handlers import OnComplete
from coldstream.handlers import OnError
from coldstream.handlers import OnNext
from coldstream.observer import Observer
from coldstream.observer import Teardown
from coldstream.subscription import Subscription
from coldstream.utils.type_utils import override

logger = logging.getLogger(__name__)

# Covariant type param: An Observable producing type X can also produce
# a subtype of X.
_T_out_co = TypeVar("_T_out_co", covariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name

SubscribeFunction = Callable[[Observer[_T]], Teardown | None]


class Observable(ObservableBase[_T_out_co]):
    """
    Cold Observable built from a subscribe function.

    The subscribe function is stored as-is and is only invoked when ``subscribe`` is
    called. Every subscription gets its own Observer and its own run of the subscribe
    function, which executes synchronously before ``subscribe`` returns.
    """

    __slots__ = ("_subscribe_fn", )

    def __init__(self, subscribe_fn: SubscribeFunction) -> None:
        self._subscribe_fn = subscribe_fn

    @classmethod
    def from_iterable(cls, values: Iterable[_T]) -> "Observable[_T]":
        """
        Create an Observable that emits every item of ``values`` in iteration order and
        then completes.

        Because emission happens synchronously, each subscription is already complete
        (and its teardown has already run) by the time ``subscribe`` returns.

        Parameters
        ----------
        values : Iterable[_T]
            Items to emit. The iterable is consumed once, here, so one-shot iterators such as
            generators replay in full for every subscription.

        Returns
        -------
        Observable[_T]
            A cold Observable over ``values``.
        """
        items = tuple(values)

        def _subscribe(observer: Observer[_T]) -> Teardown:
            for value in items:
                observer.on_next(value)

            observer.on_complete()

            def _teardown() -> None:
                logger.debug("unsubscribed")

            return _teardown

        return cls(_subscribe)

    def _subscribe_core(self, observer: Observer) -> Subscription:
        teardown = self._subscribe_fn(observer)

        if teardown is not None and not callable(teardown):
            observer.unsubscribe()
            raise TypeError(f"Subscribe function must return a callable teardown or None, got {type(teardown)!r}")

        observer.set_teardown(teardown)
        return Subscription(observer)

    @override
    def subscribe(self,
                  on_next: ObserverBase[_T_out_co] | ObserverHandlers | OnNext | None = None,
                  on_error: OnError | None = None,
                  on_complete: OnComplete | None = None) -> Subscription:

        if isinstance(on_next, (ObserverBase, ObserverHandlers)) and (on_error is not None or on_complete is not None):
            raise TypeError("on_error and on_complete cannot be combined with an observer or handler record")

        if isinstance(on_next, ObserverBase):
            # Wrap so each subscription keeps its own terminal state and teardown
            return self._subscribe_core(Observer(on_next.on_next, on_next.on_error, on_next.on_complete))

        if isinstance(on_next, ObserverHandlers):
            return self._subscribe_core(Observer.from_handlers(on_next))

        return self._subscribe_core(Observer(on_next, on_error, on_complete))
