# ---- Real captured git push stderr ----

# GitHub, first push of a new branch
GITHUB_NEW_BRANCH_STDERR = (
    "remote: \n"
    "remote: Create a pull request for 'feature' on GitHub by visiting:\n"
    "remote:      https://github.com/user/repo/pull/new/feature\n"
    "remote: \n"
    "To https://github.com/user/repo.git\n"
    " * [new branch]      feature -> feature\n"
)

# GitLab, first push of a new branch
GITLAB_NEW_BRANCH_STDERR = (
    "remote: \n"
    "remote: To create a merge request for feat, visit:\n"
    "remote:   https://gitlab.com/user/repo/-/merge_requests/new?x=1\n"
    "remote: \n"
    "To gitlab.com:user/repo.git\n"
    " * [new branch]      feat -> feat\n"
)

# GitLab, push to a branch that already has an open merge request
GITLAB_EXISTING_MR_STDERR = (
    "remote: \n"
    "remote: View merge request for feat:\n"
    "remote:   https://gitlab.com/user/repo/-/merge_requests/7\n"
    "remote: \n"
    "To gitlab.com:user/repo.git\n"
    "   1a2b3c4..5d6e7f8  feat -> feat\n"
)

# Bitbucket, first push of a new branch
BITBUCKET_NEW_BRANCH_STDERR = (
    "remote: \n"
    "remote: Create pull request for feat:\n"
    "remote:   https://bitbucket.org/user/repo/pull-requests/new?source=feat&t=1\n"
    "remote: \n"
    "To bitbucket.org:user/repo.git\n"
    " * [new branch]      feat -> feat\n"
)

# Push to an existing branch, no provider message
PLAIN_PUSH_STDERR = (
    "To github.com:user/repo.git\n"
    "   1a2b3c4..5d6e7f8  main -> main\n"
)

# Remote progress with carriage returns and erase-to-end-of-line
PROGRESS_PUSH_STDERR = (
    "Enumerating objects: 5, done.\n"
    "Counting objects:  20% (1/5)\r"
    "Counting objects: 100% (5/5), done.\n"
    "remote: Resolving deltas:   0% (0/2)\x1b[K\r"
    "remote: Resolving deltas: 100% (2/2), completed with 2 local objects.\x1b[K\n"
    "To github.com:user/repo.git\n"
    "   1a2b3c4..5d6e7f8  main -> main\n"
)

UP_TO_DATE_STDERR = "Everything up-to-date\n"


# ---- Real captured git pull stdout ----

PULL_UP_TO_DATE_STDOUT = "Already up to date.\n"

PULL_FAST_FORWARD_STDOUT = (
    "Updating 1a2b3c4..5d6e7f8\n"
    "Fast-forward\n"
    " README.md   | 2 +-\n"
    " src/app.py  | 5 +++++\n"
    " setup.cfg   | 1 +\n"
    " 3 files changed, 7 insertions(+), 1 deletion(-)\n"
)

PULL_MERGE_STDOUT = (
    "Merge made by the 'ort' strategy.\n"
    " docs/index.md | 4 ++++\n"
    " 1 file changed, 4 insertions(+)\n"
)

PULL_REBASE_STDOUT = "Successfully rebased and updated refs/heads/main.\n"


# ---- Real captured git fetch stderr ----

FETCH_STDERR = (
    "From github.com:user/repo\n"
    "   1a2b3c4..5d6e7f8  main       -> origin/main\n"
)
