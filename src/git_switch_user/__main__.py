from git_switch_user.cli import cli

cli(prog_name="git-switch-user")
