import dataclasses
import typing

import pytest

from video_tweet.mcp.dispatcher import ToolDispatcher
from video_tweet.mcp.tools import MCPToolsRegistry

EXPECTED_TOOLS = [
    "get_youtube_transcript",
    "generate_tweets_from_transcript",
    "create_typefully_draft",
]


class TestCatalog:
    def test_lists_three_tools_in_registration_order(
        self, registry: MCPToolsRegistry
    ) -> None:
        assert [tool.name for tool in registry.list_tools()] == EXPECTED_TOOLS

    def test_schemas_match_catalog(self, registry: MCPToolsRegistry) -> None:
        schemas = registry.get_tool_schemas()

        assert [schema["name"] for schema in schemas] == EXPECTED_TOOLS
        for schema in schemas:
            assert schema["description"]
            assert schema["inputSchema"]["type"] == "object"

    def test_repeated_listing_is_stable(self, dispatcher: ToolDispatcher) -> None:
        first = [tool.model_dump() for tool in dispatcher.list_tools()]
        second = [tool.model_dump() for tool in dispatcher.list_tools()]

        assert first == second

    @pytest.mark.anyio
    async def test_listing_unchanged_after_calls(
        self, dispatcher: ToolDispatcher
    ) -> None:
        before = [tool.model_dump() for tool in dispatcher.list_tools()]

        await dispatcher.call_tool("nonexistent_tool", {})
        await dispatcher.call_tool("create_typefully_draft", {"content": "hi"})

        after = [tool.model_dump() for tool in dispatcher.list_tools()]
        assert before == after

    def test_returned_list_is_a_copy(self, registry: MCPToolsRegistry) -> None:
        tools = registry.list_tools()
        tools.clear()

        assert len(registry.list_tools()) == 3

    def test_metadata_is_frozen(self, registry: MCPToolsRegistry) -> None:
        metadata = registry.list_tools()[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            metadata.name = "renamed"  # type: ignore[misc]

    def test_handlers_take_their_arguments_model(
        self, registry: MCPToolsRegistry
    ) -> None:
        for metadata in registry.list_tools():
            hints = typing.get_type_hints(metadata.handler)

            assert hints["arguments"] is metadata.arguments_model


class TestFind:
    def test_finds_registered_tool(self, registry: MCPToolsRegistry) -> None:
        metadata = registry.find("create_typefully_draft")

        assert metadata is not None
        assert metadata.name == "create_typefully_draft"

    @pytest.mark.parametrize(
        "name", ["", "get_youtube", "Get_Youtube_Transcript", "get_youtube_transcript "]
    )
    def test_no_fuzzy_matching(self, registry: MCPToolsRegistry, name: str) -> None:
        assert registry.find(name) is None


class TestInputSchemas:
    def test_transcript_schema(self, registry: MCPToolsRegistry) -> None:
        metadata = registry.find("get_youtube_transcript")
        assert metadata is not None

        schema = metadata.input_schema
        assert schema["required"] == ["videoUrl"]
        assert schema["properties"]["videoUrl"]["type"] == "string"

    def test_tweet_schema(self, registry: MCPToolsRegistry) -> None:
        metadata = registry.find("generate_tweets_from_transcript")
        assert metadata is not None

        schema = metadata.input_schema
        properties = schema["properties"]
        assert schema["required"] == ["transcript", "prompt"]
        assert properties["maxTweets"]["type"] == "integer"
        assert properties["maxTweets"]["minimum"] == 1
        assert properties["maxTweets"]["maximum"] == 10
        assert properties["style"]["enum"] == [
            "conversational",
            "informative",
            "engaging",
            "professional",
        ]
        assert properties["format"]["enum"] == ["thread", "single"]

    def test_draft_schema(self, registry: MCPToolsRegistry) -> None:
        metadata = registry.find("create_typefully_draft")
        assert metadata is not None

        schema = metadata.input_schema
        properties = schema["properties"]
        assert schema["required"] == ["content"]
        assert properties["threadify"]["type"] == "boolean"
        assert properties["share"]["type"] == "boolean"
        assert properties["scheduleDate"]["type"] == "string"

    def test_dispatcher_exposes_mcp_tools(self, dispatcher: ToolDispatcher) -> None:
        tools = dispatcher.list_tools()

        assert [tool.name for tool in tools] == EXPECTED_TOOLS
        assert tools[0].inputSchema["required"] == ["videoUrl"]
