"""Project resources: projects, hooks, members, deploy tokens and variables."""