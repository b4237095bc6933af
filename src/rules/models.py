from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class ContractRules(BaseModel):
    allow_reinitialize: bool = False
    bootstrap_owner: str | None = None


class CharityRules(BaseModel):
    name_max_length: int = Field(default=100, gt=0)
    initial_reputation_score: int = 100


class MilestoneRules(BaseModel):
    description_max_length: int = Field(default=500, gt=0)


class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)


class Rules(BaseModel):
    project: ProjectRules
    contract: ContractRules = Field(default_factory=ContractRules)
    charity: CharityRules = Field(default_factory=CharityRules)
    milestone: MilestoneRules = Field(default_factory=MilestoneRules)
    ops: OpsRules = Field(default_factory=OpsRules)


def default_rules() -> Rules:
    """Rules used when no file is configured (tests, embedded use)."""
    return Rules(project=ProjectRules(slug="charity-ledger", rules_version="1"))
