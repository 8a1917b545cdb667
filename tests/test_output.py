"""
Tests for the output module.

Tests the migration emitter, the model emitter and the artifact writer.
"""

from datetime import datetime

import pytest

from schema_scaffold.config import ScaffoldConfig
from schema_scaffold.discovery import InferencePipeline, ScriptedDecisionSource
from schema_scaffold.metadata import EXAMPLE_SCHEMA, schema_from_dict
from schema_scaffold.models import ColumnSpec, RelationshipSet, TableSpec
from schema_scaffold.output import (
    ArtifactWriter,
    MigrationEmitter,
    ModelEmitter,
    migration_filename,
    model_filename,
)

TIMESTAMP = datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture
def tables():
    return schema_from_dict(EXAMPLE_SCHEMA)


@pytest.fixture
def pipeline(tables):
    return InferencePipeline(tables)


@pytest.fixture
def relationships(pipeline):
    return pipeline.run()


class TestMigrationEmitter:
    """Tests for migration rendering."""

    def test_filename(self):
        assert migration_filename("users", TIMESTAMP) == "2024_01_02_030405_create_users_table.php"

    def test_columns_and_modifiers(self, tables, relationships):
        source = MigrationEmitter().render(tables["users"], relationships.for_table("users"))

        assert "class CreateUsersTable extends Migration" in source
        assert "Schema::create('users', function (Blueprint $table) {" in source
        assert "$table->increments('id');" in source
        assert "$table->string('email')->unique();" in source
        assert "$table->rememberToken();" in source
        assert "$table->timestamps();" in source
        assert "Schema::dropIfExists('users');" in source
        # Inverse relationships never produce constraints
        assert "$table->foreign(" not in source

    def test_arguments_indexes_and_foreign_keys(self, tables, relationships):
        source = MigrationEmitter().render(tables["profiles"], relationships.for_table("profiles"))

        assert "$table->integer('user_id')->unsigned();" in source
        assert "$table->string('phone', 30);" in source
        assert "$table->unique('phone');" in source
        assert "$table->foreign('user_id')->references('id')->on('users');" in source
        assert source.index("$table->unique('phone');") < source.index("$table->foreign(")

    def test_pivot_migration(self, tables, relationships):
        source = MigrationEmitter().render(tables["role_user"], relationships.for_table("role_user"))

        assert "class CreateRoleUserTable extends Migration" in source
        assert source.count("$table->foreign(") == 2
        assert "$table->foreign('role_id')->references('id')->on('roles');" in source

    def test_list_and_bool_arguments(self):
        emitter = MigrationEmitter()
        assert emitter.render_column(
            ColumnSpec(type="enum", name="status", arguments=[["draft", "live"]])
        ) == "            $table->enum('status', ['draft', 'live']);\n"
        assert emitter.render_column(
            ColumnSpec(type="integer", name="votes", arguments=[False, True])
        ) == "            $table->integer('votes', false, true);\n"

    def test_modifier_with_argument(self):
        column = ColumnSpec(type="string", name="nickname", modifiers={"nullable": "", "default": "'anon'"})
        line = MigrationEmitter().render_column(column)
        assert line.strip() == "$table->string('nickname')->nullable()->default('anon');"

    def test_render_all_orders_by_declaration(self, tables, relationships):
        migrations = MigrationEmitter().render_all(tables, relationships, TIMESTAMP)

        assert list(migrations) == [
            "2024_01_02_030405_create_users_table.php",
            "2024_01_02_030406_create_profiles_table.php",
            "2024_01_02_030407_create_posts_table.php",
            "2024_01_02_030408_create_roles_table.php",
            "2024_01_02_030409_create_role_user_table.php",
        ]
        assert sorted(migrations) == list(migrations)


class TestModelEmitter:
    """Tests for model rendering."""

    def test_user_model(self, tables, relationships, pipeline):
        source = ModelEmitter(pipeline.schema_index).render(tables["users"], relationships.for_table("users"))

        assert "namespace App;" in source
        assert "class User extends Model" in source
        assert "use Illuminate\\Database\\Eloquent\\SoftDeletes;" in source
        assert "    use SoftDeletes;" in source
        assert "protected $table = 'users';" in source
        assert "protected $fillable = ['id', 'name', 'email', 'password'];" in source
        assert "public function profiles()" in source
        assert "return $this->hasMany('App\\Profile');" in source
        assert "return $this->belongsToMany('App\\Role');" in source
        # Methods follow relationship order
        assert source.index("function profiles()") < source.index("function posts()") < source.index("function roles()")

    def test_belongs_to_accessor_is_singular(self, tables, relationships, pipeline):
        source = ModelEmitter(pipeline.schema_index).render(tables["profiles"], relationships.for_table("profiles"))

        assert "class Profile extends Model" in source
        assert "SoftDeletes" not in source
        assert "public function user()" in source
        assert "return $this->belongsTo('App\\User');" in source

    def test_has_one_inverse(self, tables, pipeline):
        source = ScriptedDecisionSource([False, False, True])
        relationships = InferencePipeline(tables, source).run()

        model = ModelEmitter(pipeline.schema_index).render(tables["users"], relationships.for_table("users"))

        assert "public function profile()" in model
        assert "return $this->hasOne('App\\Profile');" in model

    def test_owner_side_has_one_keeps_foreign_key(self, tables, pipeline):
        # profiles: not one to many, but a profile has one user
        relationships = InferencePipeline(tables, ScriptedDecisionSource([False, True, True])).run()

        migration = MigrationEmitter().render(tables["profiles"], relationships.for_table("profiles"))
        assert "$table->foreign('user_id')->references('id')->on('users');" in migration

        model = ModelEmitter(pipeline.schema_index).render(tables["profiles"], relationships.for_table("profiles"))
        assert "public function user()" in model
        assert "return $this->hasOne('App\\User');" in model

        user_model = ModelEmitter(pipeline.schema_index).render(tables["users"], relationships.for_table("users"))
        assert "function profiles()" not in user_model
        assert "function profile()" not in user_model

    def test_pivot_table_has_no_model(self, tables, relationships, pipeline):
        emitter = ModelEmitter(pipeline.schema_index)
        assert emitter.render(tables["role_user"], relationships.for_table("role_user")) is None

        models = emitter.render_all(tables, relationships)
        assert list(models) == ["User.php", "Profile.php", "Post.php", "Role.php"]

    def test_custom_namespace(self, tables, relationships, pipeline):
        emitter = ModelEmitter(pipeline.schema_index, namespace="App\\Models")
        source = emitter.render(tables["roles"], relationships.for_table("roles"))

        assert "namespace App\\Models;" in source
        assert "return $this->belongsToMany('App\\Models\\User');" in source

    def test_model_filename(self):
        assert model_filename(TableSpec(name="people", singular="PERSON")) == "Person.php"

    def test_empty_relationships(self, pipeline):
        table = TableSpec(name="tags", singular="tag", columns=[ColumnSpec(type="increments", name="id")])
        source = ModelEmitter(pipeline.schema_index).render(table, RelationshipSet().for_table("tags"))
        assert "public function" not in source


class TestArtifactWriter:
    """Tests for writing artifacts to disk."""

    @pytest.fixture
    def config(self, tmp_path):
        return ScaffoldConfig(base_path=tmp_path, timestamp=TIMESTAMP)

    def test_write_creates_directories(self, config, tmp_path):
        written = ArtifactWriter(config).write(
            migrations={"2024_create_users_table.php": "<?php // users"},
            models={"User.php": "<?php // user"},
        )

        assert written["migration"] == [tmp_path / "database" / "migrations" / "2024_create_users_table.php"]
        assert written["model"] == [tmp_path / "app" / "User.php"]
        assert (tmp_path / "app" / "User.php").read_text() == "<?php // user"

    def test_empty_contents_are_skipped(self, config):
        written = ArtifactWriter(config).write(migrations={}, models={"Pivot.php": ""})
        assert written == {"migration": [], "model": []}

    def test_existing_file_kept_when_declined(self, config, tmp_path):
        target = tmp_path / "app" / "User.php"
        target.parent.mkdir(parents=True)
        target.write_text("original")

        source = ScriptedDecisionSource([False])
        written = ArtifactWriter(config, source).write(migrations={}, models={"User.php": "new"})

        assert written["model"] == []
        assert target.read_text() == "original"
        assert source.asked == [(f"Model {target} already exists. Overwrite?", False)]

    def test_existing_file_overwritten_when_confirmed(self, config, tmp_path):
        target = tmp_path / "app" / "User.php"
        target.parent.mkdir(parents=True)
        target.write_text("original")

        written = ArtifactWriter(config, ScriptedDecisionSource([True])).write(
            migrations={}, models={"User.php": "new"},
        )

        assert written["model"] == [target]
        assert target.read_text() == "new"

    def test_disabled_artifact_kinds(self, tmp_path):
        config = ScaffoldConfig(base_path=tmp_path, create_models=False)
        written = ArtifactWriter(config).write(
            migrations={"m.php": "<?php"},
            models={"User.php": "<?php"},
        )

        assert "model" not in written
        assert not (tmp_path / "app").exists()


class TestScaffoldConfig:
    """Tests for ScaffoldConfig paths."""

    def test_default_paths(self, tmp_path):
        config = ScaffoldConfig(base_path=tmp_path)
        assert config.migration_path == tmp_path / "database" / "migrations"
        assert config.model_path == tmp_path / "app"

    def test_namespace_slashes_are_normalized(self, tmp_path):
        config = ScaffoldConfig(base_path=str(tmp_path), model_namespace="App/Models")
        assert config.model_namespace == "App\\Models"
        assert config.model_path == tmp_path / "app" / "Models"

    def test_namespace_only_sharing_root_prefix(self, tmp_path):
        config = ScaffoldConfig(base_path=tmp_path, model_namespace="Application\\Models")
        assert config.model_path == tmp_path / "app" / "Application" / "Models"

    def test_from_dict(self):
        config = ScaffoldConfig.from_dict({"create_models": False, "migrations_dir": "db/migrations"})
        assert config.create_models is False
        assert config.create_migrations is True
        assert str(config.migrations_dir) == "db/migrations"
