"""Resource graph domain models.

Contains the Pydantic models for tool users (Agent, Workflow), the tool
references they point at, and the knowledge sets and sources linked to
them by owner name.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from toolcreds.graph.enums import ResourceKind

SYNC_FILE_SUFFIX = ".sync-file"


class Resource(BaseModel):
    """Base for every object stored in the resource graph."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    kind: ClassVar[ResourceKind]

    name: str = Field(..., min_length=1, description="Object name")
    namespace: str = Field(..., min_length=1, description="Enclosing namespace")

    @property
    def kind_name(self) -> str:
        """Kind label for logs and metrics; the class name when no kind is declared."""
        kind: ResourceKind | None = getattr(type(self), "kind", None)
        return kind.value if kind is not None else type(self).__name__


class ToolInfo(BaseModel):
    """Credential requirement and verdict for one tool of a tool user."""

    credential_names: list[str] = Field(
        default_factory=list, description="Credential names the tool requires"
    )
    authorized: bool = Field(
        default=False, description="All required credentials exist"
    )


class ToolDescription(BaseModel):
    """Resolved description of an internal tool."""

    name: str = Field(default="", description="Tool display name")
    description: str = Field(default="", description="Tool description")
    credential_names: list[str] = Field(
        default_factory=list, description="Credentials the tool requires"
    )


class ToolReferenceSpec(BaseModel):
    """Where the tool definition comes from."""

    reference: str = Field(default="", description="Tool locator")


class ToolReferenceStatus(BaseModel):
    """Resolved state of a tool reference; tool is None until resolved."""

    tool: ToolDescription | None = Field(
        default=None, description="Resolved tool description"
    )


class ToolReference(Resource):
    """A tool resolvable by name inside the resource graph."""

    kind: ClassVar[ResourceKind] = ResourceKind.TOOL_REFERENCE

    spec: ToolReferenceSpec = Field(default_factory=ToolReferenceSpec)
    status: ToolReferenceStatus = Field(default_factory=ToolReferenceStatus)


class ToolManifest(BaseModel):
    """Tool lists declared by a tool user."""

    tools: list[str] = Field(default_factory=list, description="Tools")
    default_thread_tools: list[str] = Field(
        default_factory=list, description="Tools enabled on every thread"
    )
    available_thread_tools: list[str] = Field(
        default_factory=list, description="Tools a thread may enable"
    )


class ToolUserSpec(BaseModel):
    manifest: ToolManifest = Field(default_factory=ToolManifest)


class ToolUserStatus(BaseModel):
    tool_infos: dict[str, ToolInfo] = Field(
        default_factory=dict, description="Tool name to computed tool info"
    )


class ToolUser(Resource):
    """An entity that references tools and accumulates tool info status.

    Subclasses declare how knowledge sets are linked to them by overriding
    knowledge_set_owner_field().
    """

    spec: ToolUserSpec = Field(default_factory=ToolUserSpec)
    status: ToolUserStatus = Field(default_factory=ToolUserStatus)

    def get_tools(self) -> list[str]:
        """All referenced tool names, in declaration order, without duplicates."""
        manifest = self.spec.manifest
        seen: set[str] = set()
        tools: list[str] = []
        for tool in (
            *manifest.tools,
            *manifest.default_thread_tools,
            *manifest.available_thread_tools,
        ):
            if tool and tool not in seen:
                seen.add(tool)
                tools.append(tool)
        return tools

    def get_tool_infos(self) -> dict[str, ToolInfo]:
        return self.status.tool_infos

    def set_tool_infos(self, tool_infos: dict[str, ToolInfo]) -> None:
        """Replace the tool info map wholesale."""
        self.status.tool_infos = dict(tool_infos)

    def knowledge_set_owner_field(self) -> str | None:
        """Field selector key linking knowledge sets to this tool user.

        None means this kind of tool user never owns knowledge sets.
        """
        return None


class Agent(ToolUser):
    kind: ClassVar[ResourceKind] = ResourceKind.AGENT

    def knowledge_set_owner_field(self) -> str | None:
        return "spec.agent_name"


class Workflow(ToolUser):
    kind: ClassVar[ResourceKind] = ResourceKind.WORKFLOW

    def knowledge_set_owner_field(self) -> str | None:
        return "spec.workflow_name"


class KnowledgeSetSpec(BaseModel):
    agent_name: str = Field(default="", description="Owning agent")
    workflow_name: str = Field(default="", description="Owning workflow")


class KnowledgeSet(Resource):
    """A group of knowledge sources owned by an agent or workflow."""

    kind: ClassVar[ResourceKind] = ResourceKind.KNOWLEDGE_SET

    spec: KnowledgeSetSpec = Field(default_factory=KnowledgeSetSpec)


class KnowledgeSourceManifest(BaseModel):
    source_type: str = Field(
        default="", description="Source type such as onedrive, notion or website"
    )


class KnowledgeSourceSpec(BaseModel):
    knowledge_set_name: str = Field(default="", description="Owning knowledge set")
    manifest: KnowledgeSourceManifest = Field(default_factory=KnowledgeSourceManifest)


class KnowledgeSource(Resource):
    """A source of knowledge files synced with a type-specific credential."""

    kind: ClassVar[ResourceKind] = ResourceKind.KNOWLEDGE_SOURCE

    spec: KnowledgeSourceSpec = Field(default_factory=KnowledgeSourceSpec)

    def sync_credential_name(self) -> str | None:
        """Credential name the file sync of this source needs, if typed."""
        source_type = self.spec.manifest.source_type
        if not source_type:
            return None
        return source_type + SYNC_FILE_SUFFIX
