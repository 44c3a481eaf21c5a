import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator


class ScoringWeights(BaseModel):
    """
    Weights for combining factor sub-scores into the compatibility score.

    score = skills * w_skills + experience * w_experience
            + location * w_location + salary * w_salary
    """
    skills: float = Field(default=0.5, ge=0, le=1)
    experience: float = Field(default=0.3, ge=0, le=1)
    location: float = Field(default=0.1, ge=0, le=1)
    salary: float = Field(default=0.1, ge=0, le=1)

    @model_validator(mode="after")
    def check_sum(self) -> "ScoringWeights":
        total = self.skills + self.experience + self.location + self.salary
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total:.3f}")
        return self


class NeutralScores(BaseModel):
    """Sub-scores used when a factor has no usable data."""
    location_no_preference: int = Field(default=50, ge=0, le=100)
    location_miss: int = Field(default=30, ge=0, le=100)
    salary_no_preference: int = Field(default=50, ge=0, le=100)


class RecommendationThresholds(BaseModel):
    """Minimum scores for each recommendation tier (below `fair` is weak)."""
    excellent: int = Field(default=90, ge=0, le=100)
    good: int = Field(default=75, ge=0, le=100)
    fair: int = Field(default=60, ge=0, le=100)

    @model_validator(mode="after")
    def check_order(self) -> "RecommendationThresholds":
        if not (self.excellent > self.good > self.fair):
            raise ValueError(
                "Recommendation thresholds must be strictly descending: "
                f"excellent={self.excellent}, good={self.good}, fair={self.fair}"
            )
        return self


class DialogueConfig(BaseModel):
    """
    Configuration for the dialogue engine.

    random_seed pins template selection so responses are reproducible;
    None draws from system entropy.
    """
    random_seed: Optional[int] = None


class EngineConfig(BaseModel):
    """Top-level configuration for the compatibility and dialogue engines."""
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    neutral: NeutralScores = Field(default_factory=NeutralScores)
    thresholds: RecommendationThresholds = Field(default_factory=RecommendationThresholds)
    dialogue: DialogueConfig = Field(default_factory=DialogueConfig)


def _read_yaml(config_path: str) -> Dict[str, Any]:
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")
        if not os.path.exists(config_path):
            return {}

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: str = "config.yaml") -> EngineConfig:
    """
    Load engine configuration from the `engine` section of a YAML file.

    A missing file yields the defaults. ENGINE_RANDOM_SEED overrides
    dialogue.random_seed.
    """
    data = _read_yaml(config_path)
    engine_data = data.get('engine') or {}

    env_seed = os.environ.get("ENGINE_RANDOM_SEED")
    if env_seed:
        if 'dialogue' not in engine_data or engine_data['dialogue'] is None:
            engine_data['dialogue'] = {}
        engine_data['dialogue']['random_seed'] = int(env_seed)

    return EngineConfig(**engine_data)
