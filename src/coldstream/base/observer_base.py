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
from abc import ABC
from abc import abstractmethod
from typing import Generic
from typing import TypeVar

# Contravariant type param: An Observer that can accept type X can also
# accept any supertype of X.
_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name


class ObserverBase(Generic[_T_in_contra], ABC):
    """
    Receiving end of a subscription, one instance per ``subscribe`` call.

    ``on_error`` and ``on_complete`` are terminal and mutually exclusive: whichever arrives
    first ends the subscription, runs its teardown action, and turns every later
    notification into a no-op.
    """

    @abstractmethod
    def on_next(self, value: _T_in_contra) -> None:
        """
        Deliver one value. Dropped once the subscription has ended.
        """
        pass

    @abstractmethod
    def on_error(self, exc: typing.Any) -> None:
        """
        End the subscription with an error payload of any type, handed over as-is.
        """
        pass

    @abstractmethod
    def on_complete(self) -> None:
        """
        End the subscription normally.
        """
        pass
