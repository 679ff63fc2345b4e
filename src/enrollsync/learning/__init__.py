# SPDX-License-Identifier: Apache-2.0
"""Learning-access bounded context: who may view course material."""
