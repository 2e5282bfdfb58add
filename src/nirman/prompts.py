"""Fixed texts printed or copied by the CLI."""

PROJECT_PROMPT = """You are an AI assistant helping users create a project structure using the Nirman tool. The user needs to provide a template that describes their desired project layout and file contents. Generate a template following these guidelines:

1. Start with "// Project:" followed by a descriptive project name.
2. Include a "// Libraries:" line listing required libraries or dependencies.
3. Start each file declaration with "// File:" followed by the file path and name.
4. Include the content of each file directly under its declaration.
5. Use a variety of file types relevant to a typical web development project (e.g., .tsx, .css, .json).
6. Create a basic but realistic project structure, including:
   - A main page or entry point
   - At least one component
   - A stylesheet
   - A configuration file (e.g., package.json) that includes the listed libraries
7. Use comments (//) within the template to provide explanations or placeholder instructions.
8. Ensure the structure demonstrates the creation of directories through file paths.
9. Keep the content of each file brief but representative of its purpose.
10. Make sure the package.json file reflects the project name and listed libraries.

Example structure to include:
- Project name and libraries declaration
- src/
  - app/
    - page.tsx
    - components/
      - SomeComponent.tsx
  - styles/
    - globals.css
- package.json

Provide a template that a user could directly input into the Nirman tool to create a simple but functional project structure, complete with project name and required libraries."""

HELP_TEXT = """
Nirman - Intelligent Project Structure Creation Tool

Usage:
  nirman [command] [options]

Commands:
  create <project-name>  Create a new project with the specified name
  prompt                 Copy the project structure prompt to clipboard
  help                   Display help information for Nirman

Options:
  -V, --version          Output the version number
  -v, --verbose          Log diagnostic details
  -h, --help             Display help for command

Prompt Structure:
  The prompt guides you to create a project structure with the following elements:
  - Project name
  - Required libraries
  - File structure (including directories)
  - Basic content for each file

Template Format:
  // Project: my-app
  // Libraries: react, react-dom
  // File: src/index.js
  console.log("hello");

Editor:
  create opens $EDITOR (default: nano). Set it per run with --editor, or
  with the `editor` key in .nirman.yml.

Example:
  nirman create my-new-project
  nirman prompt
  nirman help
"""
