#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Static strings and defaults used in the fracmatrix package

    Determinant methods

        METHOD = 'method'

        ROW_REDUCTION = 'row_reduction'

        COFACTOR = 'cofactor'

    Singular matrix handling during inversion

        SINGULAR_POLICY = 'singular_policy'

        RAISE = 'raise'

        ZERO_MATRIX = 'zero_matrix'
"""

# Determinant methods
METHOD = 'method'
ROW_REDUCTION = 'row_reduction'
COFACTOR = 'cofactor'
DETERMINANT_METHODS = (ROW_REDUCTION, COFACTOR)
DEFAULT_DETERMINANT_METHOD = ROW_REDUCTION

# Singular matrix handling
SINGULAR_POLICY = 'singular_policy'
RAISE = 'raise'
ZERO_MATRIX = 'zero_matrix'
SINGULAR_POLICIES = (RAISE, ZERO_MATRIX)
DEFAULT_SINGULAR_POLICY = RAISE


def check_option(key, value, allowed):
    """Return value if it is one of the allowed settings for key, raise ValueError otherwise"""
    if value not in allowed:
        raise ValueError(f"Unknown {key} '{value}'. Allowed values are: " + ", ".join(allowed))
    return value
