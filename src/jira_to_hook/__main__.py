from jira_to_hook.main import main

main()
