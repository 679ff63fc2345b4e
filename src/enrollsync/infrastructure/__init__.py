# SPDX-License-Identifier: Apache-2.0
"""Infrastructure shared across bounded contexts."""
