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

import pytest

from coldstream.base.observable_base import ObservableBase
from coldstream.base.observer_base import ObserverBase
from coldstream.observable import Observable
from coldstream.observer import Observer


def test_bases_are_abstract():
    with pytest.raises(TypeError):
        ObserverBase()  # pylint: disable=abstract-class-instantiated

    with pytest.raises(TypeError):
        ObservableBase()  # pylint: disable=abstract-class-instantiated


def test_concrete_classes_implement_bases():
    assert isinstance(Observer(), ObserverBase)
    assert isinstance(Observable(lambda observer: None), ObservableBase)
