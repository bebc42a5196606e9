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

from coldstream.base.observable_base import ObservableBase
from coldstream.base.observer_base import ObserverBase
from coldstream.handlers import ObserverHandlers
from coldstream.handlers import OnComplete
from coldstream.handlers import OnError
from coldstream.handlers import OnNext
from coldstream.observable import Observable
from coldstream.observer import Observer
from coldstream.observer import Teardown
from coldstream.observer import TeardownAlreadyAttachedError
from coldstream.subscription import Subscription

__all__ = [
    "Observable",
    "ObservableBase",
    "Observer",
    "ObserverBase",
    "ObserverHandlers",
    "OnComplete",
    "OnError",
    "OnNext",
    "Subscription",
    "Teardown",
    "TeardownAlreadyAttachedError",
]
