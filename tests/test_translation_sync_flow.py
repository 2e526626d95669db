import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest import mock

from application.translation_sync import RunConfig, run_translation_sync
from domain.constants import DEFAULT_COMMIT_MESSAGE, DEFAULT_PULL_REQUEST_BODY, DEFAULT_PULL_REQUEST_TITLE
from infrastructure.action.sync_factory import build_sync_dependencies
from infrastructure.github.pr_gateway import GitHubPullRequestPublisher

from fakes import FakeProcessRunner, FakePublisher, RecordingObserver


DIRTY_STATUS = " M locales/fr.json\n?? locales/de.json\n"


class TranslationSyncFlowTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.working_directory = Path(self._tmp.name)
        (self.working_directory / "gt.config.json").write_text("{}", encoding="utf-8")
        self.base_config = RunConfig(
            working_directory=self.working_directory,
            api_key="k1",
            repository="acme/site",
            ref="refs/heads/develop",
            github_token="ghs_token",
        )

    def _run(self, config: RunConfig, runner: FakeProcessRunner, publisher=None):
        observer = RecordingObserver()
        dependencies = build_sync_dependencies(
            {},
            runner=runner,
            publisher=publisher or FakePublisher(),
            observer=observer,
        )
        return run_translation_sync(config, dependencies), observer

    def test_missing_api_key_fails_validation_without_invocations(self) -> None:
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)
        publisher = FakePublisher()

        result, _ = self._run(replace(self.base_config, api_key=""), runner, publisher)

        self.assertTrue(result.failed)
        self.assertEqual(result.stage, "validate")
        self.assertEqual(result.error_kind, "ConfigurationError")
        self.assertEqual(result.message, "GT_API_KEY is required")
        self.assertEqual(runner.calls, [])
        self.assertEqual(publisher.calls, [])

    def test_missing_config_file_fails_before_tool_install(self) -> None:
        (self.working_directory / "gt.config.json").unlink()
        runner = FakeProcessRunner()

        result, _ = self._run(self.base_config, runner)

        self.assertEqual(result.error_kind, "ConfigurationError")
        self.assertIn("gt.config.json not found in", result.message)
        self.assertEqual(runner.calls, [])

    def test_missing_working_directory_fails_validation(self) -> None:
        missing = self.working_directory / "does-not-exist"
        runner = FakeProcessRunner()

        result, _ = self._run(replace(self.base_config, working_directory=missing), runner)

        self.assertEqual(result.error_kind, "ConfigurationError")
        self.assertEqual(result.message, f"Working directory does not exist: {missing}")
        self.assertEqual(runner.calls, [])

    def test_clean_tree_is_a_successful_no_op(self) -> None:
        config = replace(
            self.base_config,
            branch_name="translations-update",
            create_pull_request=True,
        )
        runner = FakeProcessRunner(status_output="  \n")
        publisher = FakePublisher()

        result, _ = self._run(config, runner, publisher)

        self.assertEqual(result.status, "no_changes")
        self.assertFalse(result.failed)
        self.assertIsNone(result.pull_request)
        self.assertEqual(
            runner.argvs,
            [
                ("npm", "install", "-D", "gtx-cli"),
                ("npx", "gtx-cli", "translate"),
                ("git", "config", "user.name", "generaltranslation-bot"),
                ("git", "config", "user.email", "bot@generaltranslation.com"),
                ("git", "status", "--porcelain"),
            ],
        )
        self.assertEqual(publisher.calls, [])

    def test_dirty_tree_with_branch_commits_pushes_and_opens_pull_request(self) -> None:
        config = replace(
            self.base_config,
            branch_name="translations-update",
            create_pull_request=True,
        )
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)
        publisher = FakePublisher()

        result, _ = self._run(config, runner, publisher)

        self.assertEqual(result.status, "completed")
        self.assertEqual(
            runner.argvs[4:],
            [
                ("git", "status", "--porcelain"),
                ("git", "checkout", "-b", "translations-update"),
                ("git", "add", "-A"),
                ("git", "commit", "-m", DEFAULT_COMMIT_MESSAGE),
                ("git", "push", "origin", "translations-update"),
            ],
        )
        self.assertEqual(
            publisher.calls,
            [
                {
                    "owner": "acme",
                    "repo": "site",
                    "title": DEFAULT_PULL_REQUEST_TITLE,
                    "body": DEFAULT_PULL_REQUEST_BODY,
                    "head": "translations-update",
                    "base": "develop",
                    "token": "ghs_token",
                }
            ],
        )
        self.assertIsNotNone(result.pull_request)
        self.assertEqual(result.pull_request.url, "https://github.com/acme/site/pull/7")
        self.assertEqual(result.pull_request.number, 7)

    def test_all_commands_run_inside_working_directory(self) -> None:
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)

        self._run(self.base_config, runner)

        self.assertTrue(runner.calls)
        self.assertTrue(all(call.cwd == self.working_directory for call in runner.calls))

    def test_without_branch_pushes_current_branch_and_skips_pull_request(self) -> None:
        config = replace(
            self.base_config,
            commit_message="chore: sync locales",
            create_pull_request=True,
        )
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)
        publisher = FakePublisher()

        result, observer = self._run(config, runner, publisher)

        self.assertEqual(result.status, "completed")
        self.assertIsNone(result.pull_request)
        self.assertNotIn(("git", "checkout", "-b"), [argv[:3] for argv in runner.argvs])
        self.assertEqual(runner.argvs[-2], ("git", "commit", "-m", "chore: sync locales"))
        self.assertEqual(runner.argvs[-1], ("git", "push"))
        self.assertEqual(publisher.calls, [])
        self.assertIn(("create_branch", "skipped"), observer.statuses())
        self.assertIn(("publish_pull_request", "skipped"), observer.statuses())

    def test_branch_without_pull_request_flag_does_not_publish(self) -> None:
        config = replace(self.base_config, branch_name="translations-update")
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)
        publisher = FakePublisher()

        result, _ = self._run(config, runner, publisher)

        self.assertEqual(result.status, "completed")
        self.assertEqual(runner.argvs[-1], ("git", "push", "origin", "translations-update"))
        self.assertEqual(publisher.calls, [])

    def test_translate_receives_api_key_and_project_id_overlay(self) -> None:
        config = replace(self.base_config, project_id="proj-42")
        runner = FakeProcessRunner()

        self._run(config, runner)

        translate_call = runner.calls[1]
        self.assertEqual(translate_call.argv, ("npx", "gtx-cli", "translate"))
        self.assertEqual(translate_call.env, {"GT_API_KEY": "k1", "GT_PROJECT_ID": "proj-42"})
        self.assertIsNone(runner.calls[0].env)

    def test_translate_overlay_omits_missing_project_id(self) -> None:
        runner = FakeProcessRunner()

        self._run(self.base_config, runner)

        self.assertEqual(runner.calls[1].env, {"GT_API_KEY": "k1"})

    def test_install_failure_halts_pipeline(self) -> None:
        runner = FakeProcessRunner(failures=[("npm",)])

        result, _ = self._run(self.base_config, runner)

        self.assertEqual(result.stage, "install_tool")
        self.assertEqual(result.error_kind, "ToolInstallError")
        self.assertTrue(result.message.startswith("Failed to install gtx-cli: Command failed (exit_code=1)"))
        self.assertEqual(runner.argvs, [("npm", "install", "-D", "gtx-cli")])

    def test_translation_failure_is_reported_as_translation_error(self) -> None:
        runner = FakeProcessRunner(failures=[("npx", "gtx-cli")])

        result, _ = self._run(self.base_config, runner)

        self.assertEqual(result.error_kind, "TranslationError")
        self.assertTrue(result.message.startswith("Failed to run translations:"))
        self.assertEqual(len(runner.calls), 2)

    def test_git_config_failure_is_reported_as_git_config_error(self) -> None:
        runner = FakeProcessRunner(failures=[("git", "config", "user.email")])

        result, _ = self._run(self.base_config, runner)

        self.assertEqual(result.error_kind, "GitConfigError")
        self.assertTrue(result.message.startswith("Failed to configure git:"))
        self.assertNotIn(("git", "status", "--porcelain"), runner.argvs)

    def test_push_failure_keeps_local_commit(self) -> None:
        config = replace(self.base_config, branch_name="translations-update")
        runner = FakeProcessRunner(status_output=DIRTY_STATUS, failures=[("git", "push")])
        publisher = FakePublisher()

        result, _ = self._run(replace(config, create_pull_request=True), runner, publisher)

        self.assertEqual(result.stage, "commit_and_push")
        self.assertEqual(result.error_kind, "GitError")
        self.assertIn("git push origin translations-update", result.message)
        self.assertIn(("git", "commit", "-m", DEFAULT_COMMIT_MESSAGE), runner.argvs)
        self.assertEqual(publisher.calls, [])

    def test_branch_creation_failure_stops_before_commit(self) -> None:
        config = replace(self.base_config, branch_name="translations-update")
        runner = FakeProcessRunner(status_output=DIRTY_STATUS, failures=[("git", "checkout")])

        result, _ = self._run(config, runner)

        self.assertEqual(result.stage, "create_branch")
        self.assertTrue(result.message.startswith("Failed to create branch:"))
        self.assertNotIn(("git", "add", "-A"), runner.argvs)

    def test_missing_token_fails_publish_without_api_call(self) -> None:
        config = replace(
            self.base_config,
            branch_name="translations-update",
            create_pull_request=True,
            github_token=None,
        )
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)
        session = mock.Mock()

        result, _ = self._run(config, runner, GitHubPullRequestPublisher(session=session))

        self.assertEqual(result.stage, "publish_pull_request")
        self.assertEqual(result.error_kind, "PublishError")
        self.assertEqual(result.message, "GITHUB_TOKEN is required to create a pull request")
        session.post.assert_not_called()

    def test_rejected_pull_request_reports_stage_prefix(self) -> None:
        config = replace(
            self.base_config,
            branch_name="translations-update",
            create_pull_request=True,
        )
        session = mock.Mock()
        session.headers = {}
        response = mock.Mock()
        response.status_code = 422
        response.text = ""
        response.json.return_value = {"message": "Validation Failed", "errors": []}
        session.post.return_value = response

        result, _ = self._run(
            config,
            FakeProcessRunner(status_output=DIRTY_STATUS),
            GitHubPullRequestPublisher(session=session),
        )

        self.assertEqual(result.stage, "publish_pull_request")
        self.assertEqual(result.error_kind, "PublishError")
        self.assertTrue(result.message.startswith("Failed to create pull request: GitHub PR creation failed (422)"))
        self.assertIn("Validation Failed", result.message)
        session.post.assert_called_once()

    def test_missing_token_is_reported_before_missing_repository(self) -> None:
        config = replace(
            self.base_config,
            branch_name="translations-update",
            create_pull_request=True,
            repository=None,
            github_token=None,
        )
        publisher = FakePublisher()

        result, _ = self._run(config, FakeProcessRunner(status_output=DIRTY_STATUS), publisher)

        self.assertEqual(result.error_kind, "PublishError")
        self.assertEqual(result.message, "GITHUB_TOKEN is required to create a pull request")
        self.assertEqual(publisher.calls, [])

    def test_branch_group_title_names_the_branch(self) -> None:
        config = replace(self.base_config, branch_name="translations-update")

        _, observer = self._run(config, FakeProcessRunner(status_output=DIRTY_STATUS))

        self.assertIn(
            ("create_branch", "start", "Step 5: Creating branch translations-update"),
            observer.events,
        )

    def test_missing_repository_slug_fails_publish(self) -> None:
        config = replace(
            self.base_config,
            branch_name="translations-update",
            create_pull_request=True,
            repository=None,
        )
        publisher = FakePublisher()

        result, _ = self._run(config, FakeProcessRunner(status_output=DIRTY_STATUS), publisher)

        self.assertEqual(result.error_kind, "PublishError")
        self.assertTrue(result.message.startswith("Failed to create pull request: GITHUB_REPOSITORY"))
        self.assertEqual(publisher.calls, [])

    def test_observer_sees_each_stage_start_and_end_in_order(self) -> None:
        config = replace(self.base_config, branch_name="translations-update")
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)

        _, observer = self._run(config, runner)

        self.assertEqual(
            observer.statuses(),
            [
                ("validate", "start"),
                ("validate", "success"),
                ("install_tool", "start"),
                ("install_tool", "success"),
                ("translate", "start"),
                ("translate", "success"),
                ("configure_git", "start"),
                ("configure_git", "success"),
                ("detect_changes", "start"),
                ("detect_changes", "success"),
                ("create_branch", "start"),
                ("create_branch", "success"),
                ("commit_and_push", "start"),
                ("commit_and_push", "success"),
                ("publish_pull_request", "skipped"),
            ],
        )

    def test_change_detection_runs_exactly_once(self) -> None:
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)

        self._run(self.base_config, runner)

        status_calls = [argv for argv in runner.argvs if argv[:2] == ("git", "status")]
        self.assertEqual(len(status_calls), 1)

    def test_unexpected_exception_is_contained_in_stage_failure(self) -> None:
        runner = FakeProcessRunner(status_output=DIRTY_STATUS)
        dependencies = build_sync_dependencies({}, runner=runner, publisher=FakePublisher(), observer=RecordingObserver())
        dependencies = replace(dependencies, has_pending_changes=mock.Mock(side_effect=OSError("disk gone")))

        result = run_translation_sync(self.base_config, dependencies)

        self.assertEqual(result.stage, "detect_changes")
        self.assertEqual(result.error_kind, "GitError")
        self.assertEqual(result.message, "Failed to check for changes: disk gone")


if __name__ == "__main__":
    unittest.main()
