# SPDX-License-Identifier: Apache-2.0
"""Administrative-records bounded context: enrollment tracking and reporting."""
