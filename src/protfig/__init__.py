# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""protfig: static diagrams of proteins and their annotated domains."""

__app_name__ = "protfig"
__version__ = "0.1.0"
