"""
Tests for GraphQL query and field resolvers, executed against the schema
"""

import pytest
import pytest_asyncio
from bson import ObjectId

from nsperf.graphql.schema import schema


async def execute(query, context, variables=None):
    return await schema.execute(query, variable_values=variables, context_value=context)


@pytest_asyncio.fixture
async def seeded(repository):
    """One application with two startup records from one device."""
    application = await repository.create_application(
        name="Groceries", git_hub_url="https://github.com/acme/groceries", info="demo"
    )
    device = await repository.create_device(
        name="Pixel", token="tok-1", device_type="android", os_version="14"
    )
    first = await repository.create_startup_info(
        application_id=application.id, device_id=device.id, startup_time="812"
    )
    second = await repository.create_startup_info(
        application_id=application.id, device_id=device.id, startup_time="640"
    )
    return {"application": application, "device": device, "startup_infos": [first, second]}


class TestApplicationQueries:
    @pytest.mark.asyncio
    async def test_application_by_id(self, context, seeded):
        application = seeded["application"]

        result = await execute(
            'query { application(_id: "%s") { _id name gitHubUrl info } }' % application.id,
            context,
        )

        assert result.errors is None
        assert result.data["application"] == {
            "_id": application.id,
            "name": "Groceries",
            "gitHubUrl": "https://github.com/acme/groceries",
            "info": "demo",
        }

    @pytest.mark.asyncio
    async def test_missing_application_is_null(self, context):
        result = await execute(
            'query { application(_id: "%s") { _id } }' % ObjectId(), context
        )

        assert result.errors is None
        assert result.data["application"] is None

    @pytest.mark.asyncio
    async def test_malformed_id_is_field_error(self, context, seeded):
        result = await execute(
            'query { application(_id: "oops") { _id } applications { name } }', context
        )

        assert result.errors is not None
        assert len(result.errors) == 1
        assert result.errors[0].path == ["application"]
        assert "Invalid identifier" in result.errors[0].message
        # Partial response for unaffected fields
        assert result.data["application"] is None
        assert result.data["applications"] == [{"name": "Groceries"}]

    @pytest.mark.asyncio
    async def test_application_by_name(self, context, seeded):
        result = await execute(
            'query { applicationByName(name: "Groceries") { _id } }', context
        )

        assert result.data["applicationByName"] == {"_id": seeded["application"].id}

    @pytest.mark.asyncio
    async def test_applications_list(self, context, repository, seeded):
        await repository.create_application(name="Weather")

        result = await execute("query { applications { name } }", context)

        assert result.data["applications"] == [{"name": "Groceries"}, {"name": "Weather"}]

    @pytest.mark.asyncio
    async def test_application_startupinfos(self, context, seeded):
        application = seeded["application"]

        result = await execute(
            'query { application(_id: "%s") { startupinfos { _id startupTime } } }'
            % application.id,
            context,
        )

        startup_infos = result.data["application"]["startupinfos"]
        assert {s["_id"] for s in startup_infos} == {s.id for s in seeded["startup_infos"]}


class TestStartUpInfoQueries:
    @pytest.mark.asyncio
    async def test_startupinfo_by_id(self, context, seeded):
        startup_info = seeded["startup_infos"][0]

        result = await execute(
            'query { startupinfo(_id: "%s") { _id applicationId deviceId startupTime } }'
            % startup_info.id,
            context,
        )

        assert result.data["startupinfo"] == {
            "_id": startup_info.id,
            "applicationId": seeded["application"].id,
            "deviceId": seeded["device"].id,
            "startupTime": "812",
        }

    @pytest.mark.asyncio
    async def test_startupinfos_filtered_by_application(self, context, repository, seeded):
        await repository.create_startup_info(application_id=str(ObjectId()), startup_time="1")

        filtered = await execute(
            'query { startupinfos(applicationId: "%s") { startupTime } }'
            % seeded["application"].id,
            context,
        )
        everything = await execute("query { startupinfos { startupTime } }", context)

        assert [s["startupTime"] for s in filtered.data["startupinfos"]] == ["812", "640"]
        assert len(everything.data["startupinfos"]) == 3

    @pytest.mark.asyncio
    async def test_nested_graph_has_string_ids(self, context, seeded):
        application = seeded["application"]
        device = seeded["device"]

        result = await execute(
            """
            query Nested($id: String) {
              application(_id: $id) {
                _id
                startupinfos {
                  _id
                  application { _id name }
                  device { _id token type osVersion }
                }
              }
            }
            """,
            context,
            variables={"id": application.id},
        )

        assert result.errors is None
        nested = result.data["application"]
        assert nested["_id"] == application.id
        assert len(nested["startupinfos"]) == 2
        for startup_info in nested["startupinfos"]:
            assert isinstance(startup_info["_id"], str)
            assert startup_info["application"] == {"_id": application.id, "name": "Groceries"}
            assert startup_info["device"] == {
                "_id": device.id,
                "token": "tok-1",
                "type": "android",
                "osVersion": "14",
            }

    @pytest.mark.asyncio
    async def test_dangling_references_are_null(self, context, repository):
        await repository.create_startup_info(
            application_id=str(ObjectId()), device_id=None, startup_time="5"
        )

        result = await execute(
            "query { startupinfos { application { _id } device { _id } } }", context
        )

        assert result.errors is None
        assert result.data["startupinfos"] == [{"application": None, "device": None}]

    @pytest.mark.asyncio
    async def test_malformed_foreign_key_fails_only_that_field(self, context, repository):
        await repository.create_startup_info(application_id="broken", startup_time="5")
        good_application = await repository.create_application(name="Good")
        await repository.create_startup_info(application_id=good_application.id)

        result = await execute("query { startupinfos { application { name } } }", context)

        assert len(result.errors) == 1
        assert result.errors[0].path == ["startupinfos", 0, "application"]
        assert result.data["startupinfos"] == [
            {"application": None},
            {"application": {"name": "Good"}},
        ]


class TestDeviceQueries:
    @pytest.mark.asyncio
    async def test_device_by_token(self, context, seeded):
        result = await execute('query { device(token: "tok-1") { _id name } }', context)

        assert result.data["device"] == {"_id": seeded["device"].id, "name": "Pixel"}

    @pytest.mark.asyncio
    async def test_device_by_token_prefers_newest(self, context, repository, seeded):
        newer = await repository.create_device(name="Replacement", token="tok-1")

        result = await execute('query { device(token: "tok-1") { _id name } }', context)

        assert result.data["device"] == {"_id": newer.id, "name": "Replacement"}

    @pytest.mark.asyncio
    async def test_unknown_token_is_null(self, context):
        result = await execute('query { device(token: "missing") { _id } }', context)

        assert result.errors is None
        assert result.data["device"] is None

    @pytest.mark.asyncio
    async def test_token_is_required(self, context):
        result = await execute("query { device { _id } }", context)

        assert result.errors is not None

    @pytest.mark.asyncio
    async def test_devices_with_startupinfo(self, context, seeded):
        result = await execute("query { devices { name startupinfo { startupTime } } }", context)

        assert result.data["devices"] == [
            {"name": "Pixel", "startupinfo": [{"startupTime": "812"}, {"startupTime": "640"}]}
        ]
