"""
Root cause derivation and confidence scoring for correlated alarm/telemetry pairs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.rca.hypothesis import describe, recommend_action, root_cause
from engine.rca.scoring import is_critical, score_confidence

__all__ = ["describe", "recommend_action", "root_cause", "is_critical", "score_confidence"]
