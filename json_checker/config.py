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

"""Configuration management for the checker engine."""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import configure_split_stream_logging


@dataclass
class CheckerConfig:
    """Configuration class for the checker engine."""
    log_level: str = "INFO"
    print_level: str = "ERROR"

    # message catalog used for diagnostics and documentation
    locale: str = "en"
    doc_file: Optional[str] = None

    # namespace prefix stripped from discriminant values, e.g. "minecraft:stone"
    namespace: str = "minecraft"

    # fence language of the type-signature line in hover text
    hover_language: str = "typescript"

    @classmethod
    def from_env(cls) -> 'CheckerConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('JSON_CHECKER_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('JSON_CHECKER_PRINT_LEVEL', 'ERROR'),
            locale=os.getenv('JSON_CHECKER_LOCALE', 'en'),
            doc_file=os.getenv('JSON_CHECKER_DOC_FILE') or None,
            namespace=os.getenv('JSON_CHECKER_NAMESPACE', 'minecraft'),
            hover_language=os.getenv('JSON_CHECKER_HOVER_LANGUAGE', 'typescript'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)


# Global configuration instance
checker_config = CheckerConfig.from_env()
