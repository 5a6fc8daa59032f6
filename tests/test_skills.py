import pytest

from skill_checker.services.skills import (
    EMPTY_SELECTION_MESSAGE,
    JOB_ROLES,
    list_roles,
    parse_custom_skills,
    resolve_skills,
)
from skill_checker.utils.exceptions import InvalidArgumentError


class TestJobRoles:
    """Test cases for the static job-role table"""

    def test_roles_in_display_order(self):
        assert [r.name for r in list_roles()] == [
            "Frontend Developer",
            "Backend Developer",
            "Full Stack Developer",
        ]

    def test_full_stack_skills(self):
        assert list(JOB_ROLES["Full Stack Developer"]) == ["react.js", "node.js", "express", "sql", "java"]

    def test_every_role_is_non_empty_and_lowercase(self):
        for name, skills in JOB_ROLES.items():
            assert skills, name
            assert all(s == s.lower() for s in skills)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            JOB_ROLES["Data Scientist"] = ("python",)


class TestCustomSkills:
    """Test cases for comma-separated custom skills"""

    def test_split_trim_lowercase(self):
        assert parse_custom_skills(" React, node ,Sql") == ["react", "node", "sql"]

    def test_duplicates_kept(self):
        assert parse_custom_skills("sql,SQL") == ["sql", "sql"]

    def test_empty_tokens_kept(self):
        assert parse_custom_skills("python,,sql") == ["python", "", "sql"]


class TestResolveSkills:
    """Test cases for choosing the skill source"""

    def test_role(self):
        assert resolve_skills("Backend Developer", None) == ["node.js", "express", "mongodb", "sql"]

    def test_custom_overrides_role(self):
        assert resolve_skills("Backend Developer", "Python, Go") == ["python", "go"]

    def test_blank_custom_falls_back_to_role(self):
        assert resolve_skills("Frontend Developer", "   ") == ["html", "css", "javascript", "react.js"]

    @pytest.mark.parametrize("role,custom", [
        (None, None),
        ("", ""),
        ("---Choose Role---", None),
        ("Astronaut", "  "),
    ])
    def test_nothing_selected(self, role, custom):
        with pytest.raises(InvalidArgumentError) as exc_info:
            resolve_skills(role, custom)
        assert exc_info.value.message == EMPTY_SELECTION_MESSAGE

    def test_returns_fresh_list(self):
        skills = resolve_skills("Backend Developer")
        skills.append("rust")
        assert "rust" not in JOB_ROLES["Backend Developer"]
