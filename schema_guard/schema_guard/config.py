# Copyright 2026 TIER IV, inc.
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

"""Configuration management for schema_guard."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging, resolve_level


@dataclass
class ValidatorConfig:
    """Process-wide settings for schema compilation and the command line tool."""
    layer_limit: int = 50
    log_level: str = "INFO"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            layer_limit=int(os.getenv('SCHEMA_GUARD_LAYER_LIMIT', '50')),
            log_level=os.getenv('SCHEMA_GUARD_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('SCHEMA_GUARD_PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = resolve_level(self.log_level, logging.INFO)
        stderr_level = resolve_level(self.print_level, logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('schema_guard')


# Global configuration instance
validator_config = ValidatorConfig.from_env()
