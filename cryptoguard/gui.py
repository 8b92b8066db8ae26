# gui.py
# Tk front end: choose a cipher, type or load text, encrypt or decrypt.

import tkinter as tk
from tkinter import ttk, scrolledtext, messagebox, filedialog

from cryptoguard.activity import DEFAULT_ACTIVITY_LOG, ActivityLog
from cryptoguard.ciphers import SubstitutionCipher
from cryptoguard.cli import build_cipher, displayable
from cryptoguard.engine import available_ciphers, resolve_variant
from cryptoguard.exceptions import InvalidKey
from cryptoguard.fileio import output_path_for, read_text, write_text


class CipherApp:
    """Main application window."""
    def __init__(self, root_tk, activity=None):
        self.root = root_tk
        self.root.title("CryptoGuard - Classical Cipher Toolkit")
        self.root.geometry("800x700")
        self.activity = activity

        self.cipher_names = [cls.name for cls in available_ciphers()]
        self.cipher_var = tk.StringVar(value=self.cipher_names[0])
        self.input_mode = tk.StringVar(value="text")

        main_frame = ttk.Frame(self.root, padding=10)
        main_frame.pack(fill="both", expand=True)
        self.create_settings_panel(main_frame)
        self.create_io_panel(main_frame)
        self.create_button_panel(main_frame)

        self.update_key_panel()
        self.update_input_panel()

    def create_settings_panel(self, parent):
        settings = ttk.LabelFrame(parent, text="Cipher", padding=10)
        settings.pack(fill="x", pady=5)

        ttk.Label(settings, text="Algorithm:").grid(row=0, column=0, padx=5, pady=5, sticky="w")
        combo = ttk.Combobox(settings, textvariable=self.cipher_var, values=self.cipher_names, state="readonly")
        combo.grid(row=0, column=1, padx=5, pady=5, sticky="ew")
        combo.bind("<<ComboboxSelected>>", lambda _event: self.update_key_panel())

        self.key_label = ttk.Label(settings, text="Key:")
        self.key_label.grid(row=1, column=0, padx=5, pady=5, sticky="w")
        self.key_entry = ttk.Entry(settings, font=('Consolas', 10))
        self.key_entry.grid(row=1, column=1, padx=5, pady=5, sticky="ew")

        self.mapping_label = ttk.Label(settings, text="26-Letter Mapping:")
        self.mapping_entry = ttk.Entry(settings, font=('Consolas', 10))

        mode_frame = ttk.Frame(settings)
        mode_frame.grid(row=3, column=1, padx=5, pady=5, sticky="w")
        ttk.Radiobutton(mode_frame, text="Text input", value="text", variable=self.input_mode,
                        command=self.update_input_panel).pack(side="left", padx=(0, 10))
        ttk.Radiobutton(mode_frame, text="File input", value="file", variable=self.input_mode,
                        command=self.update_input_panel).pack(side="left")
        settings.columnconfigure(1, weight=1)

    def create_io_panel(self, parent):
        self.file_frame = ttk.LabelFrame(parent, text="Files", padding=10)
        ttk.Label(self.file_frame, text="Input file:").grid(row=0, column=0, padx=5, pady=5, sticky="w")
        self.input_file_entry = ttk.Entry(self.file_frame)
        self.input_file_entry.grid(row=0, column=1, padx=5, pady=5, sticky="ew")
        ttk.Button(self.file_frame, text="Browse...", command=self.browse_input).grid(row=0, column=2, padx=5)
        ttk.Label(self.file_frame, text="Output file:").grid(row=1, column=0, padx=5, pady=5, sticky="w")
        self.output_file_entry = ttk.Entry(self.file_frame)
        self.output_file_entry.grid(row=1, column=1, padx=5, pady=5, sticky="ew")
        ttk.Button(self.file_frame, text="Browse...", command=self.browse_output).grid(row=1, column=2, padx=5)
        self.file_frame.columnconfigure(1, weight=1)

        self.text_frame = ttk.LabelFrame(parent, text="Input text", padding=10)
        self.input_text = scrolledtext.ScrolledText(self.text_frame, height=10, relief=tk.SOLID, borderwidth=1)
        self.input_text.pack(fill="both", expand=True)

        self.output_frame = ttk.LabelFrame(parent, text="Output", padding=10)
        self.output_text = scrolledtext.ScrolledText(self.output_frame, height=10, state="disabled",
                                                     relief=tk.SOLID, borderwidth=1)
        self.output_text.pack(fill="both", expand=True)

    def create_button_panel(self, parent):
        btn_frame = ttk.Frame(parent)
        btn_frame.pack(side="bottom", fill="x", pady=10)
        ttk.Button(btn_frame, text="Encrypt", command=lambda: self.perform(encrypt=True)).pack(side="left", padx=10)
        ttk.Button(btn_frame, text="Decrypt", command=lambda: self.perform(encrypt=False)).pack(side="left", padx=10)
        ttk.Button(btn_frame, text="Copy output", command=self.copy_output).pack(side="left", padx=10)
        ttk.Button(btn_frame, text="Clear", command=self.clear_all).pack(side="left", padx=10)

    def update_key_panel(self):
        """Show the mapping field for substitution, the key field otherwise."""
        if resolve_variant(self.cipher_var.get()) is SubstitutionCipher:
            self.key_label.grid_remove(); self.key_entry.grid_remove()
            self.mapping_label.grid(row=2, column=0, padx=5, pady=5, sticky="w")
            self.mapping_entry.grid(row=2, column=1, padx=5, pady=5, sticky="ew")
        else:
            self.mapping_label.grid_remove(); self.mapping_entry.grid_remove()
            self.key_label.grid(); self.key_entry.grid()

    def update_input_panel(self):
        self.file_frame.pack_forget(); self.text_frame.pack_forget(); self.output_frame.pack_forget()
        if self.input_mode.get() == "file":
            self.file_frame.pack(fill="x", pady=5)
        else:
            self.text_frame.pack(fill="both", expand=True, pady=5)
        self.output_frame.pack(fill="both", expand=True, pady=5)

    def browse_input(self):
        path = filedialog.askopenfilename(title="Choose input file")
        if path:
            self.input_file_entry.delete(0, tk.END); self.input_file_entry.insert(0, path)

    def browse_output(self):
        path = filedialog.asksaveasfilename(title="Choose output file")
        if path:
            self.output_file_entry.delete(0, tk.END); self.output_file_entry.insert(0, path)

    def set_output(self, text):
        self.output_text.configure(state="normal")
        self.output_text.delete("1.0", tk.END); self.output_text.insert("1.0", text)
        self.output_text.configure(state="disabled")

    def perform(self, encrypt):
        """Run the selected cipher on the current input and show the result."""
        action = "Encryption" if encrypt else "Decryption"
        try:
            cipher = build_cipher(self.cipher_var.get(), self.key_entry.get(), self.mapping_entry.get())
            if self.input_mode.get() == "file":
                input_path = self.input_file_entry.get().strip()
                if not input_path:
                    raise FileNotFoundError("Please choose an input file first.")
                source = read_text(input_path)
            else:
                # Text widgets always end with a newline of their own
                source = self.input_text.get("1.0", "end-1c")

            result = cipher.encrypt(source) if encrypt else cipher.decrypt(source)
            self.set_output(displayable(result))

            if self.input_mode.get() == "file":
                output_path = self.output_file_entry.get().strip()
                if not output_path:
                    output_path = str(output_path_for(input_path, "_encrypted" if encrypt else "_decrypted"))
                    self.output_file_entry.insert(0, output_path)
                write_text(output_path, result)
                done = "encrypted" if encrypt else "decrypted"
                if self.activity is not None:
                    self.activity.record(cipher.name, done, output_path)
                messagebox.showinfo(f"{action} Complete", f"File {done} successfully!\nSaved at: {output_path}")
        except InvalidKey as e:
            messagebox.showerror(f"{action} Failed", f"Key error: {e}")
        except OSError as e:
            messagebox.showerror(f"{action} Failed", f"File error: {e}")

    def copy_output(self):
        output = self.output_text.get("1.0", "end-1c")
        if output:
            self.root.clipboard_clear(); self.root.clipboard_append(output)
            messagebox.showinfo("Copy Successful", "Output copied to clipboard!")

    def clear_all(self):
        self.input_text.delete("1.0", tk.END)
        self.set_output("")
        for entry in (self.key_entry, self.mapping_entry, self.input_file_entry, self.output_file_entry):
            entry.delete(0, tk.END)
        self.input_mode.set("text")
        self.update_input_panel()


def main(log_file=DEFAULT_ACTIVITY_LOG):
    app_root = tk.Tk()
    style = ttk.Style(app_root); available_themes = style.theme_names()
    if 'vista' in available_themes: style.theme_use('vista')
    elif 'clam' in available_themes: style.theme_use('clam')
    elif 'aqua' in available_themes: style.theme_use('aqua')
    CipherApp(app_root, activity=ActivityLog(log_file))
    app_root.mainloop()


if __name__ == '__main__':
    main()
