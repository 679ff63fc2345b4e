# SPDX-License-Identifier: Apache-2.0
"""Tenancy bounded context: organizations using the platform."""
