"""Tests for generation hooks."""

from gql_opgen.core.hooks import AddHeaderHook, HookRunner, PostGenerateHook


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_adds_comment_header(self):
        hook = AddHeaderHook("Auto-generated")
        result = hook.post_generate("getUser.graphql", "query GetUser {\n  getUser\n}")
        assert result.startswith("# Auto-generated\n\n")

    def test_preserves_content(self):
        hook = AddHeaderHook("# Header")
        content = "query Me {\n  me\n}"
        result = hook.post_generate("me.graphql", content)
        assert result == "# Header\n\n" + content

    def test_handles_header_with_newline(self):
        hook = AddHeaderHook("# Header\n")
        assert hook.post_generate("me.graphql", "doc") == "# Header\n\ndoc"

    def test_multi_line_header(self):
        hook = AddHeaderHook("Generated by gql-opgen\n\nDo not edit")
        result = hook.post_generate("me.graphql", "doc")
        assert result == "# Generated by gql-opgen\n#\n# Do not edit\n\ndoc"

    def test_is_post_generate_hook(self):
        assert isinstance(AddHeaderHook("x"), PostGenerateHook)


class TestHookRunner:
    """Tests for HookRunner."""

    def test_runs_hooks_in_order(self):
        class Suffix:
            def __init__(self, suffix):
                self.suffix = suffix

            def post_generate(self, filename, content):
                return content + self.suffix

        runner = HookRunner()
        runner.add_post_hook(Suffix("-a"))
        runner.add_post_hook(Suffix("-b"))
        assert runner.run_post_hooks("f.graphql", "doc") == "doc-a-b"

    def test_receives_filename(self):
        seen = []

        class Recorder:
            def post_generate(self, filename, content):
                seen.append(filename)
                return content

        runner = HookRunner()
        runner.add_post_hook(Recorder())
        runner.run_post_hooks("getUser.graphql", "doc")
        assert seen == ["getUser.graphql"]

    def test_no_hooks(self):
        assert HookRunner().run_post_hooks("f.graphql", "doc") == "doc"
